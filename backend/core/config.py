# core/config.py
from typing import Annotated, Any, Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AnyUrl, BeforeValidator, computed_field, Field
from urllib.parse import quote_plus, urlencode


def _split_csv(v: Any) -> Any:
    # "a, b" -> ["a", "b"]; JSON lists and real lists pass through
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    if isinstance(v, (list, str)):
        return v
    raise ValueError(v)


def _blank_to_none(v: str | None) -> str | None:
    if isinstance(v, str):
        return v.strip() or None
    return v


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
    )

    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    LOG_LEVEL: str = "INFO"

    # Tokens
    JWT_SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_EXPIRES_MIN: int = 60

    BACKEND_CORS_ORIGINS: Annotated[list[AnyUrl] | str,
                                    BeforeValidator(_split_csv)] = Field(default_factory=list)

    # Mongo, assembled into MONGODB_URI unless MONGO_URI is given
    MONGO_URI: str | None = None
    MONGO_SCHEME: Literal["mongodb", "mongodb+srv"] = "mongodb"
    MONGO_USERNAME: str | None = None
    MONGO_PASSWORD: str | None = None
    MONGO_HOSTS: Annotated[list[str] | str, BeforeValidator(_split_csv)] = "mongo"
    MONGO_PORT: int | None = 27017
    MONGO_DATABASE: str = "devconnector"
    MONGO_AUTH_SOURCE: str | None = None
    MONGO_PARAMS: dict[str, str] | str = Field(default_factory=dict)

    def _mongo_credentials(self) -> str:
        user = _blank_to_none(self.MONGO_USERNAME)
        pwd = _blank_to_none(self.MONGO_PASSWORD)
        if not (user and pwd):
            return ""
        return f"{quote_plus(user)}:{quote_plus(pwd)}@"

    def _mongo_hosts(self) -> str:
        hosts = self.MONGO_HOSTS if isinstance(self.MONGO_HOSTS, list) else [self.MONGO_HOSTS]
        # SRV records carry the port
        if self.MONGO_SCHEME == "mongodb+srv" or not self.MONGO_PORT:
            return ",".join(hosts)
        return ",".join(f"{h}:{self.MONGO_PORT}" for h in hosts)

    def _mongo_query(self) -> str:
        if isinstance(self.MONGO_PARAMS, str) and self.MONGO_PARAMS.strip():
            return f"?{self.MONGO_PARAMS.strip().lstrip('?')}"
        raw = self.MONGO_PARAMS if isinstance(self.MONGO_PARAMS, dict) else {}
        params = {str(k): str(v) for k, v in raw.items()}
        source = _blank_to_none(self.MONGO_AUTH_SOURCE)
        if source and self._mongo_credentials():
            params["authSource"] = source
        return f"?{urlencode(params)}" if params else ""

    @computed_field  # type: ignore[misc]
    @property
    def MONGODB_URI(self) -> str:
        if self.MONGO_URI:
            return self.MONGO_URI
        return (f"{self.MONGO_SCHEME}://{self._mongo_credentials()}{self._mongo_hosts()}"
                f"/{self.MONGO_DATABASE}{self._mongo_query()}")


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
