import json
import sys

from capcode.api.responses import to_response
from capcode.config.settings import Settings
from capcode.database.connection import close_pool, init_pool
from capcode.logging.logger import Log
from capcode.pipeline.models import Success
from capcode.pipeline.orchestrator import build_orchestrator


def main() -> int:
    """Entry point: load settings -> open pool -> run the pipeline once -> print response."""
    settings = Settings()
    Log.configure(settings.log_level, settings.app_env)
    uses_postgres = settings.storage_backend.lower() == "postgres"
    if uses_postgres:
        init_pool(settings)

    try:
        orchestrator = build_orchestrator(settings)
        outcome = orchestrator.run()
    finally:
        if uses_postgres:
            close_pool()

    response = to_response(outcome)
    print(json.dumps(response.body))
    return 0 if isinstance(outcome, Success) else 1


if __name__ == "__main__":
    sys.exit(main())
