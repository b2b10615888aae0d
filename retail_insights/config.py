"""
Configuration management for the retail insights pipeline.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List, Optional
import logging

from retail_insights.config_loader import ConfigLoader, ConfigError

logger = logging.getLogger(__name__)


DEFAULT_DROP_COLUMNS = [
    'Transaction_ID', 'Customer_ID', 'Name', 'Email', 'Phone', 'Address',
    'City', 'State', 'Zipcode', 'Gender', 'Income', 'Date', 'Year', 'Time',
    'Total_Purchases', 'Amount', 'Product_Brand', 'Product_Type', 'products',
]

DEFAULT_REGION_MAP = {
    'USA': 'North America',
    'Canada': 'North America',
    'Mexico': 'North America',
    'UK': 'Europe',
    'Germany': 'Europe',
    'France': 'Europe',
    'Spain': 'Europe',
    'Italy': 'Europe',
    'Netherlands': 'Europe',
    'Ireland': 'Europe',
    'Australia': 'Oceania',
    'New Zealand': 'Oceania',
}


@dataclass
class DataConfig:
    """Data configuration."""
    raw_file: str = "data/raw/retail_transactions.csv"
    cleaned_file: str = "data/cleaned/clothing_cleaned.csv"


@dataclass
class ColumnConfig:
    """Source column names, matched exactly and case-sensitively."""
    country: str = "Country"
    age: str = "Age"
    month: str = "Month"
    amount: str = "Total_Amount"
    rating: str = "Ratings"
    segment: str = "Customer_Segment"
    category: str = "Product_Category"

    def required(self) -> List[str]:
        return [self.country, self.age, self.month, self.amount,
                self.rating, self.segment, self.category]


@dataclass
class CleaningConfig:
    """Cleaning configuration."""
    drop_columns: List[str] = field(default_factory=lambda: list(DEFAULT_DROP_COLUMNS))
    keep_category: str = "Clothing"


@dataclass
class FeatureConfig:
    """Feature configuration."""
    region_map: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_REGION_MAP))


@dataclass
class OutputConfig:
    """Output configuration."""
    output_dir: str = "results"
    dpi: int = 150
    preview_rows: int = 5
    save_plots: bool = True
    save_cleaned: bool = False
    save_summary: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = "pipeline.log"


@dataclass
class PipelineConfig:
    """Main pipeline configuration."""
    name: str = "clothing_insights"
    description: str = "Descriptive analysis of clothing transactions"
    data: DataConfig = field(default_factory=DataConfig)
    columns: ColumnConfig = field(default_factory=ColumnConfig)
    cleaning: CleaningConfig = field(default_factory=CleaningConfig)
    features: FeatureConfig = field(default_factory=FeatureConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def get_default_config(cls) -> 'PipelineConfig':
        """Get the built-in default configuration."""
        return cls()

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'PipelineConfig':
        """Build a config from a plain dictionary, filling gaps with defaults."""
        sections = {
            'data': DataConfig,
            'columns': ColumnConfig,
            'cleaning': CleaningConfig,
            'features': FeatureConfig,
            'output': OutputConfig,
            'logging': LoggingConfig,
        }
        kwargs = {}
        for name, section_cls in sections.items():
            values = config_dict.get(name) or {}
            if not isinstance(values, dict):
                raise ConfigError(f"Config section '{name}' must be a mapping")
            try:
                kwargs[name] = section_cls(**values)
            except TypeError as e:
                raise ConfigError(f"Invalid keys in config section '{name}': {e}") from e

        for key in ('name', 'description'):
            if key in config_dict:
                kwargs[key] = config_dict[key]

        return cls(**kwargs)

    @classmethod
    def from_loader(cls, config_loader: ConfigLoader) -> 'PipelineConfig':
        """Build a config from a validated ConfigLoader."""
        if not config_loader.validate_config():
            raise ConfigError(f"Configuration validation failed: {config_loader.config_path}")
        return cls.from_dict(config_loader.config)

    @classmethod
    def from_yaml(cls, config_path: str) -> 'PipelineConfig':
        """Load a config straight from a YAML file."""
        return cls.from_loader(ConfigLoader(config_path))

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for logging."""
        return asdict(self)
