#!/usr/bin/env python3
"""
Retail Insights Pipeline
Config-driven descriptive analysis of clothing transactions.
"""

import os
import sys
import logging
import argparse

from retail_insights.config import PipelineConfig
from retail_insights.config_loader import ConfigError
from retail_insights.ingest_data import SchemaError
from retail_insights.pipeline import run_pipeline
from retail_insights.utils.data_loader import preview_table

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'configs/pipeline_config.yaml'


def setup_logging(level: str = 'INFO', log_file: str = None):
    """Configure root logging for a pipeline run."""
    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Retail transactions insights pipeline')
    parser.add_argument('--config', default=DEFAULT_CONFIG_PATH,
                        help='Path to YAML config (built-in defaults are used if it does not exist)')
    parser.add_argument('--data', help='Override the source CSV path')
    parser.add_argument('--output-dir', help='Override the chart and summary directory')
    parser.add_argument('--no-plots', action='store_true', help='Skip chart rendering')
    parser.add_argument('--preview-rows', type=int, help='Rows of the cleaned table to print')
    return parser.parse_args(argv)


def build_config(args) -> PipelineConfig:
    """Load the config file (or defaults) and apply command line overrides."""
    if os.path.exists(args.config):
        config = PipelineConfig.from_yaml(args.config)
    elif args.config != DEFAULT_CONFIG_PATH:
        raise FileNotFoundError(f"Config file not found: {args.config}")
    else:
        config = PipelineConfig.get_default_config()

    if args.data:
        config.data.raw_file = args.data
    if args.output_dir:
        config.output.output_dir = args.output_dir
    if args.no_plots:
        config.output.save_plots = False
    if args.preview_rows is not None:
        config.output.preview_rows = args.preview_rows
    return config


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = build_config(args)
    except (FileNotFoundError, ConfigError) as e:
        setup_logging()
        logger.error(str(e))
        return 1

    setup_logging(config.logging.level, config.logging.log_file)

    try:
        result = run_pipeline(config)
    except (FileNotFoundError, SchemaError) as e:
        logger.error(f"Cannot run pipeline: {e}")
        return 1

    print(preview_table(result.cleaned, config.output.preview_rows))

    for name, path in result.charts.items():
        logger.info(f"{name}: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
