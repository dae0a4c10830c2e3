from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str
    # Sem segredo o login e a verificação de token respondem 500
    JWT_SECRET: str | None = None
    JWT_EXPIRATION_DAYS: int = 7
    BCRYPT_ROUNDS: int = 12

    FRONTEND_ORIGINS: list[str] = ["http://localhost:5173"]
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    BOOTSTRAP_SECRETARIO_EMAIL: str = ""
    BOOTSTRAP_SECRETARIO_SENHA: str = ""
    BOOTSTRAP_SECRETARIO_NOME: str = "Secretaria"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
