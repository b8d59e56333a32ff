from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    APP_ENV: str = "development"

    # Default robot; callers may also construct DingRobot with an explicit token
    DINGTALK_ACCESS_TOKEN: str = ""
    DINGTALK_TIMEOUT: float | None = None  # None -> httpx default


settings = Settings()
