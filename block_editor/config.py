from pathlib import Path

from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    # App
    app_name: str = "Block Editor GraphQL"
    debug: bool = False

    # Handler dispatch
    handler_namespace: str = "block_editor.handlers"
    fallback_block_name: str = "Core/HTML"

    # Definitions loaded at startup
    block_definitions_dir: str = str(PACKAGE_DIR / "blocks" / "definitions")
    content_types_dir: str = str(PACKAGE_DIR / "content" / "definitions")
    content_dir: str = str(PACKAGE_DIR / "content" / "nodes")

    # Logging
    log_dir: str = str(PACKAGE_DIR.parent / "logs")

    model_config = {
        "env_prefix": "BLOCK_EDITOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
