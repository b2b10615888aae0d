"""
Tests for chart rendering, summary export and the end-to-end run.
"""

import os
import sys

import pandas as pd
import pytest
import yaml

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

import main
from retail_insights.analysis.aggregations import run_all_aggregations
from retail_insights.config import PipelineConfig
from retail_insights.data_cleaning import DataCleaner
from retail_insights.pipeline import run_pipeline
from retail_insights.utils.data_loader import preview_table, save_cleaned_data, save_summary
from retail_insights.visualization.graph_generator import GraphGenerator


@pytest.fixture
def aggregations(raw_transactions):
    cleaned = DataCleaner().clean_data(raw_transactions)
    return run_all_aggregations(cleaned)


@pytest.fixture
def config(raw_csv, tmp_path):
    config = PipelineConfig.get_default_config()
    config.data.raw_file = raw_csv
    config.data.cleaned_file = str(tmp_path / "cleaned" / "clothing.csv")
    config.output.output_dir = str(tmp_path / "results")
    config.output.dpi = 50
    return config


def test_generate_all_charts(aggregations, tmp_path):
    generator = GraphGenerator(str(tmp_path / "charts"), dpi=50)
    paths = generator.generate_all(aggregations)

    assert set(paths) == set(aggregations)
    for path in paths.values():
        assert os.path.exists(path)
        assert os.path.getsize(path) > 0


def test_empty_aggregation_is_skipped(aggregations, tmp_path):
    aggregations['rating_by_region'] = aggregations['rating_by_region'].iloc[0:0]
    paths = GraphGenerator(str(tmp_path), dpi=50).generate_all(aggregations)

    assert 'rating_by_region' not in paths
    assert 'spending_by_segment' in paths


def test_save_summary(aggregations, tmp_path):
    report = {'rows_loaded': 10, 'rows_retained': 4}
    path = tmp_path / "out" / "summary.yaml"
    save_summary(aggregations, report, str(path))

    with open(path) as f:
        summary = yaml.safe_load(f)

    assert summary['cleaning_report'] == report
    assert summary['aggregations']['spending_vs_rating'] == {'pairs': 4}
    segment = {row['Customer_Segment']: row['Total_Amount']
               for row in summary['aggregations']['spending_by_segment']}
    assert segment == {'New': 100, 'Regular': 69, 'Premium': 20}


def test_save_cleaned_data_round_trip(raw_transactions, tmp_path):
    cleaned = DataCleaner().clean_data(raw_transactions)
    path = tmp_path / "cleaned.csv"
    save_cleaned_data(cleaned, str(path))

    reloaded = pd.read_csv(path)
    assert list(reloaded.columns) == list(cleaned.columns)
    assert len(reloaded) == len(cleaned)


def test_preview_table(raw_transactions):
    cleaned = DataCleaner().clean_data(raw_transactions)
    preview = preview_table(cleaned, 2)

    assert 'USA' in preview
    assert 'Germany' in preview
    assert 'Australia' not in preview


def test_run_pipeline(config):
    config.output.save_cleaned = True
    result = run_pipeline(config)

    assert len(result.cleaned) == 4
    assert result.report['rows_retained'] == 4
    assert len(result.charts) == 5
    assert os.path.exists(result.summary_path)
    assert os.path.exists(result.cleaned_path)


def test_run_pipeline_without_outputs(config):
    config.output.save_plots = False
    config.output.save_summary = False
    result = run_pipeline(config)

    assert result.charts == {}
    assert result.summary_path is None
    assert not os.path.exists(config.output.output_dir)


def test_main_prints_preview(raw_csv, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    exit_code = main.main(['--data', raw_csv, '--output-dir', str(tmp_path / "out"),
                           '--no-plots', '--preview-rows', '3'])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert 'Region' in out
    assert 'Brazil' not in out
    assert os.path.exists(tmp_path / "out" / "summary.yaml")


def test_main_missing_data_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exit_code = main.main(['--data', str(tmp_path / "missing.csv"), '--no-plots'])
    assert exit_code == 1


def test_main_missing_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exit_code = main.main(['--config', str(tmp_path / "missing.yaml")])
    assert exit_code == 1


def test_main_unreadable_data_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    data_dir = tmp_path / "not_a_file"
    data_dir.mkdir()
    empty = tmp_path / "empty.csv"
    empty.write_text("")

    assert main.main(['--data', str(data_dir), '--no-plots']) == 1
    assert main.main(['--data', str(empty), '--no-plots']) == 1


def test_run_pipeline_without_clothing_rows(config, raw_transactions, tmp_path):
    path = tmp_path / "electronics_only.csv"
    raw_transactions.assign(Product_Category='Electronics').to_csv(path, index=False)
    config.data.raw_file = str(path)

    result = run_pipeline(config)

    assert len(result.cleaned) == 0
    assert result.report['rows_retained'] == 0
    assert result.charts == {}
    assert all(table.empty for table in result.aggregations.values())
    assert os.path.exists(result.summary_path)
