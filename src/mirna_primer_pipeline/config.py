"""Configuration management for miRNA primer pipeline."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

import yaml

from .exceptions import ConfigurationError


DEFAULT_PREFIX = "GCGGCG"
DEFAULT_SUFFIX = "GTCGTATCCAGTGCAGGGTCCGAGGTATTCGCACTGGATACGAC"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

PRIMER_LITERAL = re.compile(r'^[ACGT]*$')


@dataclass
class PipelineConfig:
    """Pipeline configuration settings."""

    prefix: str = DEFAULT_PREFIX
    suffix: str = DEFAULT_SUFFIX
    min_length: int = 18
    max_length: int = 25
    rt_overlap: int = 6
    max_input_size: int = 1024 * 1024  # characters
    primer_a_name: str = "primerRT"
    primer_b_name: str = "primerqPCR-Fwd"
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        for name in ('prefix', 'suffix', 'primer_a_name', 'primer_b_name', 'log_level'):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigurationError(f"Expected text, got {value!r}", parameter=name)

        for name in ('min_length', 'max_length', 'rt_overlap', 'max_input_size'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"Expected an integer, got {value!r}", parameter=name)

        self.prefix = self.prefix.upper()
        self.suffix = self.suffix.upper()
        self.log_level = self.log_level.upper()

        if not PRIMER_LITERAL.fullmatch(self.prefix):
            raise ConfigurationError(f"Invalid prefix: {self.prefix}", parameter="prefix")

        if not PRIMER_LITERAL.fullmatch(self.suffix):
            raise ConfigurationError(f"Invalid suffix: {self.suffix}", parameter="suffix")

        if self.min_length <= 0 or self.max_length < self.min_length:
            raise ConfigurationError(
                f"Invalid length range: {self.min_length}-{self.max_length}",
                parameter="min_length/max_length"
            )

        if self.rt_overlap <= 0 or self.rt_overlap >= self.min_length:
            raise ConfigurationError(f"Invalid rt_overlap: {self.rt_overlap}", parameter="rt_overlap")

        if self.max_input_size <= 0:
            raise ConfigurationError(f"Invalid max_input_size: {self.max_input_size}")

        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log_level: {self.log_level}", parameter="log_level")

    @classmethod
    def from_yaml(cls, yaml_file: Path) -> "PipelineConfig":
        """Load configuration from YAML file."""
        yaml_file = Path(yaml_file)
        if not yaml_file.exists():
            raise ConfigurationError(f"Config file not found: {yaml_file}")

        try:
            with open(yaml_file, 'r') as f:
                data = yaml.safe_load(f) or {}

            return cls(**data)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML config: {e}", config_file=str(yaml_file))
        except TypeError as e:
            raise ConfigurationError(f"Invalid config parameters: {e}", config_file=str(yaml_file))

    @classmethod
    def from_args(cls, args: dict, base: "PipelineConfig" = None) -> "PipelineConfig":
        """Create configuration from command-line arguments."""
        # Map command-line argument names to config field names
        arg_mapping = {
            'prefix': 'prefix',
            'suffix': 'suffix',
            'min_length': 'min_length',
            'max_length': 'max_length',
            'rt_overlap': 'rt_overlap',
            'max_input_size': 'max_input_size',
            'log_level': 'log_level',
        }

        config_args = dict(vars(base)) if base is not None else {}
        for arg_name, config_name in arg_mapping.items():
            if arg_name in args and args[arg_name] is not None:
                config_args[config_name] = args[arg_name]

        return cls(**config_args)
