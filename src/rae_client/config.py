from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # RAE service
    rae_endpoint: str = "https://dle.rae.es/srv/"
    rae_search_action: str = "search?w="
    rae_fetch_action: str = "fetch?id="

    # Scraper
    scraper_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/131.0.0.0 Safari/537.36"
    )
    scraper_request_timeout: int = 30

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
