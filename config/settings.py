# 📦 config/settings.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="THERAMATCH_")

    app_name: str = "TheraMatch Recommender"
    version: str = "1.2.0"
    host: str = "0.0.0.0"
    port: int = 8000
    prometheus_port: int = 0  # 0 = metrics server disabled
    thread_offload_threshold: int = 500

settings = Settings()
