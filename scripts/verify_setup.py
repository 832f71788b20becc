"""Verify that the Gitea connection settings work before using the client."""
import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

from gitea_client.application.client import GiteaClient
from gitea_client.domain.errors import GiteaError
from gitea_client.infrastructure.settings import GiteaSettings

# Load environment variables from .env or env file
load_dotenv('.env') or load_dotenv('env')

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def check_environment_variables():
    """Check required environment variables."""
    print("Checking environment variables...")

    required_vars = ["GITEA_URL"]
    optional_vars = ["GITEA_USERNAME", "GITEA_TIMEOUT"]

    missing = [var for var in required_vars if not os.getenv(var)]
    if missing:
        print(f"❌ Missing required environment variables: {', '.join(missing)}")
        return False

    print("✅ Required environment variables set")
    print(f"   GITEA_URL: {os.getenv('GITEA_URL')}")

    for var in optional_vars:
        if os.getenv(var):
            print(f"   {var}: {os.getenv(var)}")

    return True


def check_credentials():
    """Check that some form of authentication is configured."""
    print("\nChecking credentials...")

    token = os.getenv("GITEA_TOKEN")
    if token:
        # Never print more than a prefix of the token
        print("✅ GITEA_TOKEN set")
        print(f"   Token prefix: {token[:6]}...")
        return True

    if os.getenv("GITEA_USERNAME"):
        if not os.getenv("GITEA_PASSWORD"):
            print("⚠️  GITEA_USERNAME set without GITEA_PASSWORD")
        else:
            print("✅ Basic credentials set")
        return True

    print("⚠️  No credentials set, only public data will be reachable")
    return True


async def _fetch_current_user(settings: GiteaSettings):
    async with GiteaClient.from_settings(settings) as client:
        return await client.user().current().send(client)


def check_connection():
    """Check that the instance answers and accepts the credentials."""
    print("\nChecking connection to Gitea...")

    try:
        settings = GiteaSettings.from_env(load_env_file=False)
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        return False

    try:
        user = asyncio.run(_fetch_current_user(settings))
    except GiteaError as e:
        if e.status_code in (401, 403):
            print(f"❌ Credentials rejected by {settings.base_url} ({e.status_code})")
        else:
            print(f"❌ Request to {settings.base_url} failed: {e.kind.value} {e.status_code}: {e}")
        return False

    print(f"✅ Connected to {settings.base_url}")
    print(f"   Authenticated as: {user.login} (admin: {user.is_admin})")
    return True


def main():
    """Run all verification checks."""
    print("=" * 60)
    print("Gitea Client - Setup Verification")
    print("=" * 60)

    checks = [
        ("Environment Variables", check_environment_variables),
        ("Credentials", check_credentials),
        ("Connection", check_connection),
    ]

    results = {}
    for name, check_func in checks:
        try:
            results[name] = check_func()
        except Exception as e:
            logger.exception(f"{name} check failed with exception: {e}")
            results[name] = False

    print("\n" + "=" * 60)
    print("Verification Summary")
    print("=" * 60)

    for name, passed in results.items():
        status = "✅ PASS" if passed else "❌ FAIL"
        print(f"{status}: {name}")

    if all(results.values()):
        print("\n✅ All checks passed! The client is ready to use.")
        sys.exit(0)
    else:
        print("\n❌ Some checks failed. Please fix the issues above.")
        print("\nCommon solutions:")
        print("  - Set GITEA_URL: export GITEA_URL=https://gitea.example.com")
        print("  - Set GITEA_TOKEN: export GITEA_TOKEN=your_token")
        print("  - Create a token under Settings > Applications in the Gitea web UI")
        sys.exit(1)


if __name__ == "__main__":
    main()
