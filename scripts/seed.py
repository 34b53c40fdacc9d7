from sqlmodel import Session

from scrolloff_api.core.config import settings
from scrolloff_api.core.logs import configure_logging
from scrolloff_api.db.seed import seed_all
from scrolloff_api.db.session import engine, init_db


def run_seed():
    configure_logging(settings.LOG_LEVEL)
    init_db()
    with Session(engine) as session:
        summary = seed_all(session)
    print(f"Seed done: {summary}")


if __name__ == "__main__":
    run_seed()
