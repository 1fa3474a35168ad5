from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    CATALOG_SOURCE: str = "static"  # static or file
    CATALOG_FILE: str = "./data/carriers.json"

    API_TITLE: str = "Carrier Pricing Service"
    API_DESCRIPTION: str = "Shipping quotes between postcodes, by vehicle and by carrier"
    API_VERSION: str = "1.0.0"

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
