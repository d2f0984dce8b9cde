import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings:
    APP_SECRET_KEY: str = os.getenv("APP_SECRET_KEY", "CHANGE_ME")
    APP_TITLE: str = os.getenv("APP_TITLE", "Softwify HR")
    COMPANY_NAME: str = os.getenv("COMPANY_NAME", "SOFTWIFY")

    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Stores for browsers that stay idle longer than this are dropped.
    WORKSPACE_IDLE_MINUTES: int = int(os.getenv("WORKSPACE_IDLE_MINUTES", "120"))

    TEMPLATES_DIR: str = str(PACKAGE_DIR / "templates")
    STATIC_DIR: str = str(PACKAGE_DIR / "static")

    @property
    def WORKSPACE_IDLE_SECONDS(self) -> float:
        return self.WORKSPACE_IDLE_MINUTES * 60.0


settings = Settings()
