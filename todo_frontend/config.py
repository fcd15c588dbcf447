import os

from dotenv import load_dotenv

load_dotenv(override=False)


class ClientConfig:
    API_URL = os.environ.get("TODO_API_URL", "http://localhost:5000/todos")
    API_TIMEOUT = float(os.environ.get("TODO_API_TIMEOUT", "10"))
    MESSAGE_SECONDS = 5.0
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")
