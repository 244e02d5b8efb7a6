"""Configuration for Node Gateway Service.

Uses Pydantic settings for environment-based configuration.
"""

from __future__ import annotations

from ledger_service_libs.config import ServiceSettings
from pydantic import Field, SecretStr
from pydantic_settings import SettingsConfigDict


class NodeGatewaySettings(ServiceSettings):
    """Configuration settings for Node Gateway Service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="NODE_GATEWAY_SERVICE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Service identity
    SERVICE_NAME: str = "node-gateway-service"

    # HTTP server configuration
    HOST: str = Field(default="0.0.0.0", description="HTTP server host")
    PORT: int = Field(default=10050, description="HTTP server port")

    CORS_ORIGINS: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(
        default=True, description="Allow credentials in CORS requests"
    )
    CORS_ALLOW_METHODS: list[str] = Field(
        default=["GET", "OPTIONS"],
        description="Allowed HTTP methods for CORS (the API is read-only GET)",
    )
    CORS_ALLOW_HEADERS: list[str] = Field(
        default=["*"], description="Allowed headers for CORS requests"
    )

    # Node RPC bridge
    NODE_RPC_URL: str = Field(
        default="http://localhost:10006",
        description="Base URL of the ledger node's RPC bridge",
    )
    NODE_RPC_USERNAME: str = Field(default="user1", description="RPC user name")
    NODE_RPC_PASSWORD: SecretStr = Field(
        default=SecretStr("test"), description="RPC user password"
    )

    # HTTP client configuration
    HTTP_CLIENT_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="Request timeout for node RPC calls (not applied to workflow results)",
    )
    HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Connection timeout for node RPC calls",
    )

    # Record queries
    PAGE_SIZE: int = Field(
        default=200,
        ge=1,
        description="Fixed page size for all paged record queries",
    )
    RECORD_STATE_TYPE: str = Field(
        default="HelloState",
        description="Contract state type queried by the paged record endpoint",
    )

    # Identity listing
    SERVICE_ORGANISATIONS: list[str] = Field(
        default=["Notary", "Oracle"],
        description="Organisations of infrastructure-service nodes hidden from peer lists",
    )

    # Workflow trigger
    WORKFLOW_NAME: str = Field(default="SayHelloFlow", description="Workflow started by trigger")
    WORKFLOW_COMMAND: str = Field(
        default="Create", description="Command argument passed to the workflow"
    )


# Global settings instance
settings = NodeGatewaySettings()
