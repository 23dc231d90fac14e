"""Configuration management for SquatScan."""

import os
import yaml
from typing import Dict, List, Any, Optional, Literal
from pathlib import Path
from pydantic import BaseModel, Field, ConfigDict, ValidationError, field_validator, model_validator

from .. import constants
from ..exceptions import ConfigError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ScannerConfig(BaseModel):
    """Configuration for the enrichment scanner."""
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    threads: int = Field(default=constants.DEFAULT_THREADS, ge=1, description="Number of candidates enriched in parallel")

    # Feature toggles
    geoip: bool = Field(default=False, description="Look up the country of the first A record")
    banners: bool = Field(default=False, description="Capture the HTTP Server header")
    mxcheck: bool = Field(default=False, description="Resolve MX records and capture the SMTP greeting")
    nscheck: bool = Field(default=False, description="Resolve NS records")
    all_records: bool = Field(default=False, description="Print every DNS record instead of the first one")

    # Network
    nameservers: List[str] = Field(default_factory=list, description="DNS servers as host[:port]; only the first is queried")
    user_agent: str = Field(default=constants.DEFAULT_USER_AGENT, min_length=1, description="User-Agent for the HTTP probe")
    timeout: float = Field(default=constants.DEFAULT_TIMEOUT, gt=0.0, le=300.0, description="TCP connect/read timeout in seconds")
    dns_timeout: float = Field(default=constants.DEFAULT_TIMEOUT, gt=0.0, le=300.0, description="DNS exchange timeout in seconds")
    geoip_database: str = Field(
        default_factory=lambda: os.environ.get(constants.GEOIP_DATABASE_ENV, constants.DEFAULT_GEOIP_DATABASE),
        description="Path to a GeoLite2 country database"
    )

    @field_validator('nameservers', mode='before')
    @classmethod
    def split_nameservers(cls, v: Any) -> Any:
        """Accept the comma-separated form used on the command line."""
        if v is None:
            return []
        if isinstance(v, str):
            return [server.strip() for server in v.split(',') if server.strip()]
        return v


class TwistConfig(BaseModel):
    """Configuration for one permutation run: target, fuzzers, scanner and output."""
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    domain: str = Field(default="", description="Target domain")
    fuzzers: str = Field(default="", description="Comma-separated fuzzer names, empty for the default set")
    tld_files: List[str] = Field(default_factory=list, description="TLD dictionary files for tld-swap")
    dictionary: Optional[str] = Field(default=None, description="Word list for the dictionary fuzzer")

    # Filtering
    registered: bool = Field(default=False, description="Keep only registered candidates")
    unregistered: bool = Field(default=False, description="Keep only unregistered candidates")
    registered_by: Literal["A", "NS"] = Field(default="A", description="Record type that marks a candidate as registered")

    # Output
    format: str = Field(default="cli", description="Output format")
    output: Optional[str] = Field(default=None, description="Write output to this file instead of stdout")

    scanner: ScannerConfig = Field(default_factory=ScannerConfig)

    @field_validator('registered_by', mode='before')
    @classmethod
    def normalize_registered_by(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode='after')
    def validate_filters(self) -> 'TwistConfig':
        """Registered and unregistered filters are mutually exclusive."""
        if self.registered and self.unregistered:
            raise ValueError("options registered and unregistered are mutually exclusive")
        return self

    @classmethod
    def from_file(cls, config_path: str) -> 'TwistConfig':
        """Load configuration from YAML file."""
        logger.info(f"Loading configuration from: {config_path}")
        config_path = Path(config_path)

        if not config_path.exists():
            logger.error(f"Configuration file not found: {config_path}")
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}")
            raise ConfigError(f"Invalid YAML format in {config_path}: {e}")

        logger.debug(f"Loaded raw configuration data: {data}")
        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TwistConfig':
        """Create configuration from dictionary with validation."""
        if not isinstance(data, dict):
            raise ConfigError("Configuration data must be a dictionary")

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            logger.error(f"Configuration validation failed: {e}")
            raise ConfigError(f"Configuration validation failed: {e}")
        logger.debug("Configuration created from dictionary")
        return config

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    def save_to_file(self, config_path: str) -> None:
        """Save configuration to YAML file."""
        logger.info(f"Saving configuration to: {config_path}")
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, indent=2, sort_keys=False)

        logger.info(f"Configuration saved successfully to: {config_path}")

    def validate_config(self) -> List[str]:
        """Return non-fatal warnings about the configuration."""
        warnings = []
        if len(self.scanner.nameservers) > 1:
            warnings.append(f"Only the first nameserver ({self.scanner.nameservers[0]}) is queried")
        if self.scanner.threads > 200:
            warnings.append("High thread count (>200) may overwhelm the resolver")
        if self.scanner.timeout > 60:
            warnings.append("Timeout is very high (>60s) - consider reducing it")
        if self.format not in constants.OUTPUT_FORMATS:
            warnings.append(f"Unknown output format '{self.format}' - output will be empty")
        return warnings


def load_config(config_path: Optional[str] = None) -> TwistConfig:
    """Load configuration from file or create default."""
    if config_path is None:
        possible_paths = [Path(path) for path in [
            "squatscan.yaml",
            "config/squatscan.yaml",
            os.path.expanduser("~/.squatscan/config.yaml"),
        ]]

        for path in possible_paths:
            if path.exists():
                config_path = path
                break

    if config_path and Path(config_path).exists():
        return TwistConfig.from_file(config_path)

    return TwistConfig()


def save_default_config(config_path: str = "squatscan.yaml") -> None:
    """Save a default configuration file."""
    TwistConfig().save_to_file(config_path)
    logger.info(f"Default configuration saved to: {config_path}")
