"""
Configuration settings for osmkit
"""

from dataclasses import dataclass, field


@dataclass
class OSMAPIConfig:
    """OSM editing API endpoints and changeset metadata"""
    api_version: str = "0.6"
    
    # Production and sandbox hosts (no trailing path)
    api_url: str = "https://api.openstreetmap.org"
    devel_api_url: str = "https://master.apis.dev.openstreetmap.org"
    
    # Written to osmChange documents and the created_by changeset tag
    generator: str = "osmkit"
    author: str = "osmkit"


@dataclass
class OverpassConfig:
    """Overpass API endpoint and query defaults"""
    # Public instances: https://wiki.openstreetmap.org/wiki/Overpass_API#Public_Overpass_API_instances
    url: str = "https://overpass-api.de/api/interpreter"
    timeout: int = 180  # seconds
    verbosity: str = "body"


@dataclass
class ClientConfig:
    """Top level client configuration"""
    osm: OSMAPIConfig = field(default_factory=OSMAPIConfig)
    overpass: OverpassConfig = field(default_factory=OverpassConfig)
    
    # User agent for API requests
    user_agent: str = "osmkit/0.1"


# Global config instance
config = ClientConfig()


def get_config() -> ClientConfig:
    """Get global configuration"""
    return config


def validate_config(config: ClientConfig) -> None:
    """
    Validate that all required configuration values are set.
    Raises ValueError if any required value is missing or invalid.
    """
    errors = []
    
    if not hasattr(config, 'osm') or config.osm is None:
        errors.append("osm configuration is required but not set")
    else:
        if not config.osm.api_version:
            errors.append("osm.api_version is required but not set")
        if not config.osm.api_url:
            errors.append("osm.api_url is required but not set")
        if not config.osm.devel_api_url:
            errors.append("osm.devel_api_url is required but not set")
        if not config.osm.generator:
            errors.append("osm.generator is required but not set")
    
    if not hasattr(config, 'overpass') or config.overpass is None:
        errors.append("overpass configuration is required but not set")
    else:
        if not config.overpass.url:
            errors.append("overpass.url is required but not set")
        if config.overpass.timeout is None:
            errors.append("overpass.timeout is required but not set")
        elif config.overpass.timeout <= 0:
            errors.append(f"overpass.timeout must be positive, got {config.overpass.timeout}")
    
    if not config.user_agent:
        errors.append("user_agent is required but not set")
    
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
