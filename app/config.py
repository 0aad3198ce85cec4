from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    master_api_key: str = ""
    port: int = 3000
    log_level: str = "INFO"
    scraper_page_delay: float = 1.0
    http_timeout: float = 30.0
