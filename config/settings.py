import os
import logging
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = [
    "https://techtribe.powerappsportals.com",
    "http://127.0.0.1:5500",
    "https://datatest.powerappsportals.com",
]


def _split_origins(raw: str) -> List[str]:
    return [origin.strip().rstrip("/") for origin in raw.split(",") if origin.strip()]


class Settings:
    # Application Info
    APP_NAME: str = "Quiz Portal Relay"
    VERSION: str = "1.0.0"

    def __init__(self):
        self.DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"

        # Server Configuration
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", 5200))

        # CORS
        cors_origins = os.getenv("CORS_ORIGINS", "")
        self.CORS_ORIGINS: List[str] = _split_origins(cors_origins) if cors_origins else list(DEFAULT_CORS_ORIGINS)

        # Environment
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

        # Identity credentials (client-credential grant)
        self.CLIENT_ID: str = os.getenv("CLIENT_ID", "")
        self.TENANT_ID: str = os.getenv("TENANT_ID", "")
        self.CLIENT_SECRET: str = os.getenv("CLIENT_SECRET", "")
        self.AUTHORITY_HOST: str = os.getenv("AUTHORITY_HOST", "https://login.microsoftonline.com").rstrip("/")
        self.GRAPH_SCOPE: str = os.getenv("GRAPH_SCOPE", "https://graph.microsoft.com/.default")

        # SharePoint site and lists
        self.GRAPH_BASE_URL: str = os.getenv("GRAPH_BASE_URL", "https://graph.microsoft.com/v1.0").rstrip("/")
        self.SITE_ID: str = os.getenv("SITE_ID", "")
        self.LIST_ID: str = os.getenv("LIST_ID", "")
        self.QUIZ_LIST_ID: str = os.getenv("QUIZ_LIST_ID", "")
        self.STUDENT_LIST_ID: str = os.getenv("STUDENT_LIST_ID", "")
        self.ANSWER_LIST_ID: str = os.getenv("ANSWER_LIST_ID", "")

        # Timeouts (seconds)
        self.HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", 30))
        self.REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", 120))

    @property
    def authority(self) -> str:
        """Tenant-specific authority URL"""
        return f"{self.AUTHORITY_HOST}/{self.TENANT_ID}"

    def missing_credentials(self) -> List[str]:
        """Names of identity and list variables that are not set"""
        required = [
            "CLIENT_ID", "TENANT_ID", "CLIENT_SECRET",
            "SITE_ID", "LIST_ID", "QUIZ_LIST_ID", "STUDENT_LIST_ID", "ANSWER_LIST_ID",
        ]
        return [name for name in required if not getattr(self, name)]

    def validate(self):
        """Validate settings before serving traffic"""
        missing = self.missing_credentials()
        if not missing:
            return

        if self.is_production():
            raise ValueError(f"Missing required configuration for production: {', '.join(missing)}")

        logger.warning(f"⚠️ Configuration not complete. Missing environment variables: {', '.join(missing)}")

    def get_token_config(self) -> dict:
        """Get client-credential configuration as dictionary"""
        return {
            "client_id": self.CLIENT_ID,
            "client_secret": self.CLIENT_SECRET,
            "authority": self.authority,
            "scope": self.GRAPH_SCOPE,
            "timeout": self.HTTP_TIMEOUT,
        }

    def get_list_config(self) -> dict:
        """Get SharePoint list configuration as dictionary"""
        return {
            "base_url": self.GRAPH_BASE_URL,
            "site_id": self.SITE_ID,
            "lists": {
                "subscribers": self.LIST_ID,
                "quiz": self.QUIZ_LIST_ID,
                "students": self.STUDENT_LIST_ID,
                "answers": self.ANSWER_LIST_ID,
            },
            "timeout": self.HTTP_TIMEOUT,
        }

    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.ENVIRONMENT.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.ENVIRONMENT.lower() == "production"

    def print_config_summary(self):
        """Log configuration summary (secret is never printed)"""
        secret = "✅ Configured" if self.CLIENT_SECRET else "❌ Not configured"
        logger.info(f"""
🔧 Configuration Summary:
   App: {self.APP_NAME} v{self.VERSION}
   Environment: {self.ENVIRONMENT}
   Host: {self.HOST}:{self.PORT}
   Debug: {self.DEBUG}

   Authority: {self.authority}
   Client ID: {self.CLIENT_ID or '❌ Not configured'}
   Client secret: {secret}

   Site: {self.SITE_ID or '❌ Not configured'}
   Lists: subscribers={self.LIST_ID} quiz={self.QUIZ_LIST_ID} students={self.STUDENT_LIST_ID} answers={self.ANSWER_LIST_ID}

   CORS origins: {', '.join(self.CORS_ORIGINS)}
""")


# Create global settings instance
settings = Settings()
