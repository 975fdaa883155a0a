import os
import pathlib
from dotenv import load_dotenv

# Environment must be in place before any seasonal_trends import reads settings


def _init_test_environment():
    """
    Initialize the test environment before any tests run.
    This function is automatically called when the tests package is imported.
    """
    current_dir = pathlib.Path(__file__).parent.absolute()
    env_test_path = current_dir / ".env.test"

    if env_test_path.exists():
        load_dotenv(dotenv_path=env_test_path, override=True)

    defaults = {
        "ENV": "test",
        "ENVIRONMENT": "test",
        "REDIS_ENABLED": "false",
        "LOG_LEVEL": "warning",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)


_init_test_environment()
