"""Config specs shared by the test suite and the CLI target tests."""

from __future__ import annotations

from enum import Enum

from specyml import SpecBuilder, config_spec, in_range, matches, setting


class LogLevel(Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"


@config_spec
class Endpoint:
    host: str = setting("localhost", comment="Hostname to bind.")
    port: int = setting(8080, comment="TCP port.", validators=[in_range(1, 65535)])


@config_spec(header=["Server configuration", "#####"], key_style="kebab")
class ServerConfig:
    max_players: int = setting(20, comment="Maximum number of players.", validators=[in_range(1, 1000)])
    motd: str = setting("Hello world", comment=["Message of the day.", "Shown in the server list."])
    log_level: LogLevel = setting(LogLevel.INFO, comment="Logging verbosity.")
    ratio: float = 0.5
    endpoints: list[Endpoint] = setting(default_factory=lambda: [Endpoint()], comment="Listeners.")
    tags: set[str] = setting(default_factory=lambda: {"beta", "alpha"})
    limits: dict[str, int] = setting(default_factory=dict, comment="Per-world limits.")
    admin: str | None = None


DATABASE_SCHEMA = (
    SpecBuilder("Database")
    .header("Database settings")
    .field("url", str, required=True, comment="Connection URL.")
    .field("pool_size", int, default=5, comment="Connections kept open.")
    .field("replicas", list[str], comment="Read replicas.")
    .build()
)

# Fields without declared defaults whose zero values fail their validators.
CREDENTIALS_SCHEMA = (
    SpecBuilder("Credentials")
    .field("url", str, required=True, comment="Connection URL.", validators=[matches(r"postgres://.*")])
    .field("port", int, validators=[in_range(1, 65535)])
    .build()
)

NOT_A_SPEC = object()
