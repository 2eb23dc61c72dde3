import os

from dotenv import load_dotenv

load_dotenv()

PORT = int(os.getenv("PORT", 4000))
API_URL = os.getenv("LOCALSHOP_API_URL", "http://localhost:4000/api")
