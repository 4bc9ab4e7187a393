#!/usr/bin/env python3
"""
Script to initialize the breeding ledger.

This script:
1. Creates the ledger config state with the given parameters
2. Makes the given address the ledger owner
3. Zeroes the breed counter and the fee balance

Initialization happens once; running it against an initialized ledger fails.

Usage:
  python scripts/init_ledger.py --owner terra1admin --limit 1000 --duration 86400
"""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.errors import AppError
from src.application.use_cases.ledger import initialize_ledger
from src.config.settings import get_settings
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)
from src.infrastructure.identity.resolver import NormalizingIdentityResolver


async def init_ledger(owner: str, payload: initialize_ledger.InitializeLedgerInput) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    resolver = NormalizingIdentityResolver()

    try:
        admin = resolver.canonicalize(owner)
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            state = await initialize_ledger.execute(uow, payload, admin=admin)

        print("\n✅ Ledger initialized")
        print(f"   Owner: {resolver.display(state.owner)}")
        print(f"   Breed count limit: {state.config.breed_count_limit}")
        print(f"   Breed duration: {state.config.breed_duration}s")
        print(
            f"   Breed price: {state.config.breed_price_amount} {state.config.breed_price_denom}"
        )
    except AppError as exc:
        print(f"\n❌ Error initializing ledger: {exc.message}")
        sys.exit(1)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Initialize the breeding ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One day breedings, at most 1000 ever
  python scripts/init_ledger.py --owner terra1admin --limit 1000 --duration 86400

  # Charge 5 LUNA per breeding
  python scripts/init_ledger.py --owner terra1admin --limit 1000 --duration 86400
  --price 5000000 --denom uluna
        """,
    )
    parser.add_argument("--owner", required=True, help="Address of the ledger owner")
    parser.add_argument("--limit", type=int, required=True, help="Maximum breedings ever")
    parser.add_argument("--duration", type=int, required=True, help="Breeding time in seconds")
    parser.add_argument("--price", type=int, default=0, help="Fee per breeding")
    parser.add_argument("--denom", default="uluna", help="Fee denomination")
    parser.add_argument("--child-base-uri", help="Base URI for offspring metadata")
    parser.add_argument("--child-contract", help="Offspring token contract address")
    parser.add_argument("--child-max-supply", type=int, help="Offspring max supply")
    parser.add_argument("--parent-contract", help="Parent token contract address")

    args = parser.parse_args()

    print("=" * 60)
    print("🚀 Breeding Ledger - init")
    print("=" * 60)

    asyncio.run(
        init_ledger(
            args.owner,
            initialize_ledger.InitializeLedgerInput(
                breed_count_limit=args.limit,
                breed_duration=args.duration,
                breed_price_amount=args.price,
                breed_price_denom=args.denom,
                child_base_uri=args.child_base_uri,
                child_contract_addr=args.child_contract,
                child_nft_max_supply=args.child_max_supply,
                parent_contract_addr=args.parent_contract,
            ),
        )
    )

    print("\n" + "=" * 60)
    print("✨ Process completed")
    print("=" * 60)
