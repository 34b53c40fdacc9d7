"""
Hash les mots de passe admin encore stockés en clair (à lancer une fois).
"""

from sqlmodel import Session

from scrolloff_api.core.config import settings
from scrolloff_api.core.logs import configure_logging
from scrolloff_api.db.repositories.admins import AdminRepository
from scrolloff_api.db.session import engine
from scrolloff_api.features.admins.services import AdminService


def run_migration():
    configure_logging(settings.LOG_LEVEL)
    with Session(engine) as session:
        migrated = AdminService(AdminRepository(session)).migrate_legacy_passwords()
    print(f"{migrated} admin password(s) hashed")


if __name__ == "__main__":
    run_migration()
