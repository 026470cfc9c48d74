from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # WordPress site
    wp_url: str = ""
    wp_username: str = ""
    wp_app_password: str = ""  # Application password, not the login password

    # Transport
    wp_timeout: float = 30.0
    wp_upload_timeout: float = 120.0

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
