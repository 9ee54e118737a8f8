"""Create the back office tables and seed the default user categories."""

from src.backoffice.categories.categories_repository import CategoryRepository
from src.backoffice.config import load_config


def main() -> None:
    config = load_config()
    categories = CategoryRepository(config.session_factory).list_all()
    print(f"Database initialized at {config.database_url}.")
    for category in categories:
        print(f"  category {category.id}: {category.name}")


if __name__ == "__main__":
    main()
