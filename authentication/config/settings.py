import os
from dotenv import load_dotenv

load_dotenv()

# tokens
SECRET_KEY = os.getenv("SECRET_KEY")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15"))
REFRESH_TOKEN_EXPIRE_DAYS = int(os.getenv("REFRESH_TOKEN_EXPIRE_DAYS", "30"))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# mongo
DEVELOPMENT_ENV = os.getenv("DEVELOPMENT_ENV", "local")
MONGO_DB = os.getenv("MONGO_DB", "auth")
MEMBER_COLLECTION = "members"
REFRESH_TOKEN_COLLECTION = "refresh_tokens"

# logging
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# http
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
OAUTH_PROVIDER_TIMEOUT = float(os.getenv("OAUTH_PROVIDER_TIMEOUT", "10"))


def get_mongo_uri() -> str:
    if DEVELOPMENT_ENV == "docker":
        mongo_user = os.getenv("MONGO_USER", "root")
        mongo_pass = os.getenv("MONGO_PASS", "example")
        mongo_host = os.getenv("MONGO_HOST", "mongo")
        mongo_port = os.getenv("MONGO_PORT", "27017")
        return f"mongodb://{mongo_user}:{mongo_pass}@{mongo_host}:{mongo_port}/"
    mongo_host = os.getenv("MONGO_HOST", "localhost")
    mongo_port = os.getenv("MONGO_PORT", "27017")
    return f"mongodb://{mongo_host}:{mongo_port}/{MONGO_DB}"
