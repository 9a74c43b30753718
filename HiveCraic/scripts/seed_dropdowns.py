# Run from the HiveCraic directory:
#   python -m scripts.seed_dropdowns
#
# Creates the default dropdown categories and values. Existing categories
# (same key) are left untouched, so it is safe to run more than once.

from sqlalchemy.orm import Session

from models.dropdown import DropdownCategory, DropdownValue
from utils.transactions import uow

DEFAULT_DROPDOWNS = [
    {
        "category_key": "varroa_treatment_product",
        "category_name": "Varroa treatment products",
        "description": "Products offered in the varroa treatment form",
        "values": ["Apivar", "Api-Bioxal", "ApiLife Var", "Apiguard", "MAQS", "Oxalic acid", "Formic acid"],
    },
    {
        "category_key": "feed_type",
        "category_name": "Feed types",
        "description": "Feeds offered in the feeding form",
        "values": ["Sugar syrup 1:1", "Sugar syrup 2:1", "Fondant", "Pollen patty", "Invert syrup"],
    },
    {
        "category_key": "varroa_check_method",
        "category_name": "Varroa check methods",
        "description": "Monitoring methods offered in the varroa check form",
        "values": ["Alcohol wash", "Sugar roll", "Sticky board", "Drone brood uncapping"],
    },
]


def seed(db: Session) -> int:
    """Returns the number of categories created."""
    created = 0
    for entry in DEFAULT_DROPDOWNS:
        exists = (
            db.query(DropdownCategory)
            .filter(DropdownCategory.category_key == entry["category_key"])
            .first()
        )
        if exists:
            print(f"[SKIP] {entry['category_key']} already exists")
            continue
        category = DropdownCategory(
            category_key=entry["category_key"],
            category_name=entry["category_name"],
            description=entry["description"],
        )
        category.values = [
            DropdownValue(value=v, display_order=i, is_active=True)
            for i, v in enumerate(entry["values"], start=1)
        ]
        db.add(category)
        created += 1
        print(f"[OK] {entry['category_key']}: {len(entry['values'])} values")
    return created


def main():
    with uow(create_tables=True) as db:
        seed(db)


if __name__ == "__main__":
    main()
