from sqlalchemy import select

from src.infrastructure.db.models import Base, TicketType
from src.infrastructure.db.session import engine, get_db_session

TICKET_TYPES = ["adult", "kid"]


def seed_ticket_types(db) -> int:
    added = 0
    for name in TICKET_TYPES:
        existing = db.execute(
            select(TicketType).where(TicketType.name == name)
        ).scalar_one_or_none()
        if existing:
            continue
        db.add(TicketType(name=name))
        added += 1
    return added


def main() -> None:
    Base.metadata.create_all(bind=engine)
    with get_db_session() as db:
        added = seed_ticket_types(db)
    print(f"Seed complete: {added} ticket type(s) added.")


if __name__ == "__main__":
    main()
