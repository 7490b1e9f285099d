# src/ecssd/core/config.py

import logging
import os

from dotenv import load_dotenv

from .exceptions import ConfigError

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

logger = logging.getLogger(__name__)

DEFAULT_SCRAPE_INTERVAL = 120
DEFAULT_OUTPUT_FILE = "ecs_file_sd.yml"
OUTPUT_FORMATS = ("yaml", "json")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.

    Values are resolved at access time so that tests (and a restarted CLI
    command) always see the current environment.
    """

    # --- Docker labels read from container definitions ---
    @property
    def SCRAPE_PORT_LABEL(self) -> str:
        return os.getenv("PROMETHEUS_SCRAPE_PORT_LABEL", "PROMETHEUS_SCRAPE_PORT")

    @property
    def METRICS_PATH_LABEL(self) -> str:
        return os.getenv("PROMETHEUS_METRICS_PATH_LABEL", "PROMETHEUS_METRICS_PATH")

    @property
    def METRICS_SCHEME_LABEL(self) -> str:
        return os.getenv("PROMETHEUS_METRICS_SCHEME_LABEL", "PROMETHEUS_METRICS_SCHEME")

    # --- Discovery variables ---
    @property
    def ECS_CLUSTER(self) -> str | None:
        value = os.getenv("ECS_CLUSTER")
        return value.strip() if value else None

    @property
    def SCRAPE_INTERVAL(self) -> int:
        raw = os.getenv("SCRAPE_INTERVAL")
        if raw is None or raw.strip() == "":
            return DEFAULT_SCRAPE_INTERVAL
        try:
            interval = int(raw.strip())
        except ValueError as e:
            raise ConfigError(f"SCRAPE_INTERVAL must be a non-negative integer, got '{raw}'.") from e
        if interval < 0:
            raise ConfigError(f"SCRAPE_INTERVAL must be a non-negative integer, got '{raw}'.")
        return interval

    # --- Output variables ---
    @property
    def OUTPUT_FILE(self) -> str:
        return os.getenv("ECS_SD_OUTPUT_FILE", DEFAULT_OUTPUT_FILE)

    @property
    def OUTPUT_FORMAT(self) -> str:
        return self.output_format_for(self.OUTPUT_FILE)

    def output_format_for(self, path: str) -> str:
        """ECS_SD_OUTPUT_FORMAT when set, otherwise json for a .json path and yaml for anything else."""
        value = os.getenv("ECS_SD_OUTPUT_FORMAT")
        if value:
            return value.lower()
        return "json" if path.lower().endswith(".json") else "yaml"

    # --- AWS variables ---
    @property
    def AWS_REGION(self) -> str | None:
        return os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION")

    @property
    def AWS_MAX_ATTEMPTS(self) -> int:
        raw = os.getenv("AWS_MAX_ATTEMPTS", "5")
        try:
            return int(raw)
        except ValueError as e:
            raise ConfigError(f"AWS_MAX_ATTEMPTS must be an integer, got '{raw}'.") from e

    # --- Logging variables ---
    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def LOG_LEVEL_IS_VALID(self) -> bool:
        return isinstance(logging.getLevelName(self.LOG_LEVEL), int)

    def validate_instance(self):
        """
        Validates that the necessary configuration variables are set.

        Raises:
            ConfigError: On the first missing or malformed value.
        """
        if not self.ECS_CLUSTER:
            raise ConfigError("Required environment variable ECS_CLUSTER is missing.")
        # Accessing the properties performs the integer parsing.
        interval = self.SCRAPE_INTERVAL
        if self.AWS_MAX_ATTEMPTS < 1:
            raise ConfigError("AWS_MAX_ATTEMPTS must be at least 1.")
        if self.OUTPUT_FORMAT not in OUTPUT_FORMATS:
            raise ConfigError(f"ECS_SD_OUTPUT_FORMAT must be one of {', '.join(OUTPUT_FORMATS)}.")
        if not self.LOG_LEVEL_IS_VALID:
            raise ConfigError(f"LOG_LEVEL must be a standard logging level name, got '{self.LOG_LEVEL}'.")
        if not self.AWS_REGION:
            logger.warning("AWS_REGION is not set; falling back to the boto3 default region chain.")
        logger.debug("Configuration valid: cluster=%s interval=%ss", self.ECS_CLUSTER, interval)


# Instantiate the config to be imported by other modules
config = Config()
