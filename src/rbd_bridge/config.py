from pydantic import BaseModel, Field
from typing import List, Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class RBDConfig(BaseModel):
    """
    Runtime configuration for rbd-bridge.

    This configuration is loaded from:
    1. Environment variables (RBD_*)
    2. Configuration file (if provided)
    3. Default values (hardcoded)

    Priority: Environment variables > Config file > Defaults
    """

    # External tools
    rbd_command: str = Field(
        default="rbd",
        description="Executable used for image operations"
    )

    rados_command: str = Field(
        default="rados",
        description="Executable used for pool listing"
    )

    # Image creation defaults
    default_object_size: str = Field(
        default="4M",
        min_length=1,
        description="Object size passed to 'rbd create' when none is given"
    )

    default_features: List[str] = Field(
        default_factory=lambda: ["layering"],
        description="Image features passed to 'rbd create' when none are given"
    )

    # Cluster
    monitors: List[str] = Field(
        default_factory=list,
        description="Monitor addresses (IPv4, IPv4:port, [IPv6], [IPv6]:port or hostname)"
    )

    # Logging
    log_level: LogLevel = Field(
        default="INFO",
        description="Log level applied by configure_logging (DEBUG/INFO/WARNING/ERROR/CRITICAL)"
    )

    @classmethod
    def from_env(cls) -> "RBDConfig":
        """
        Load configuration from environment variables.

        Environment variables (RBD_*) override defaults:

        - RBD_COMMAND: Path to the rbd executable
        - RADOS_COMMAND: Path to the rados executable
        - RBD_OBJECT_SIZE: Default object size for new images
        - RBD_FEATURES: Comma-separated list of default image features
        - RBD_MONITORS: Comma-separated list of monitor addresses
        - RBD_LOG_LEVEL: Log level name
        """
        import os

        kwargs = {}

        if "RBD_COMMAND" in os.environ:
            kwargs["rbd_command"] = os.environ["RBD_COMMAND"]
        if "RADOS_COMMAND" in os.environ:
            kwargs["rados_command"] = os.environ["RADOS_COMMAND"]
        if "RBD_OBJECT_SIZE" in os.environ:
            kwargs["default_object_size"] = os.environ["RBD_OBJECT_SIZE"]
        if "RBD_FEATURES" in os.environ:
            features = os.environ["RBD_FEATURES"]
            kwargs["default_features"] = [item.strip() for item in features.split(",") if item.strip()]
        if "RBD_MONITORS" in os.environ:
            monitors = os.environ["RBD_MONITORS"]
            kwargs["monitors"] = [item.strip() for item in monitors.split(",") if item.strip()]
        if "RBD_LOG_LEVEL" in os.environ:
            kwargs["log_level"] = os.environ["RBD_LOG_LEVEL"].upper()

        return cls(**kwargs)

    @classmethod
    def from_file(cls, config_path: str) -> "RBDConfig":
        """
        Load configuration from a YAML or JSON file.

        Supported formats: .yaml, .yml, .json
        """
        import yaml

        with open(config_path, "r") as f:
            if config_path.endswith((".yaml", ".yml")):
                data = yaml.safe_load(f)
            elif config_path.endswith(".json"):
                import json
                data = json.load(f)
            else:
                raise ValueError(f"Unsupported config format: {config_path}")

        return cls(**(data or {}))
