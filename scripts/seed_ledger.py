#!/usr/bin/env python3
"""
Seed the world state with the genesis users and cars.

Features:
- Fixed dataset: user1..user3 and car1..car6
- Re-runnable: existing records with the same keys are overwritten
- Other keys in the world state are left untouched

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_ledger.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from car_ledger.adapters.sqlalchemy_world_state import SqlAlchemyWorldState
from car_ledger.infra.db.session import get_session
from car_ledger.use_cases.init_ledger import InitLedger


def seed_ledger() -> None:
    print("🌱 Seeding ledger...")

    with get_session() as session:
        result = InitLedger(world_state=SqlAlchemyWorldState(session=session)).execute()

    print(f"✅ Seeded {len(result.users)} users and {len(result.cars)} cars")

    print("\n📊 Cars:")
    for car in result.cars:
        print(f"   {car.id}: {car.year} {car.brand} {car.model} ({car.color}) - {car.owner}, ${car.price:,.2f}")


if __name__ == "__main__":
    try:
        seed_ledger()
    except Exception as e:
        print(f"❌ Error seeding ledger: {e}", file=sys.stderr)
        sys.exit(1)
