from typing import Any, Dict, List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # JWK приватного ключа подписи, в окружении передается как JSON
    auth_private_key: Dict[str, Any]
    auth_algorithm: str = "ES256"

    app_name: str = "blocksuite-example"
    token_ttl_seconds: int = 3600
    default_user_id: str = "user1"

    db_file: str = "db.json"
    delete_db_on_exit: bool = True

    host: str = "0.0.0.0"
    port: int = 5173
    cors_origins: List[str] = ["*"]
    static_dir: str = "static"

    log_level: str = "INFO"

    model_config = {
        "env_file": (".env", ".env.y-redis"),
        "extra": "ignore",
    }
