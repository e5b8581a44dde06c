
from dotenv import load_dotenv

# Load .env before `main` builds `Settings()` so a local .env can
# supply the Elasticsearch and model credentials.
load_dotenv()
