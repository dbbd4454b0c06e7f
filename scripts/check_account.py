#!/usr/bin/env python3
"""
Check that an account exists and show its balances.
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from stellar_service.config import NetworkType, ServiceConfig
from stellar_service.horizon import AccountNotFoundError, HorizonAdapter


async def check_account(account_id: str, network: str) -> dict:
    """Print sequence number and balances for an account."""
    config = ServiceConfig(network=NetworkType(network))
    horizon = HorizonAdapter(config)
    await horizon.connect()

    try:
        try:
            account = await horizon.get_account(account_id)
        except AccountNotFoundError:
            print(f"\n❌ Account {account_id} does not exist on {network}.")
            if config.network == NetworkType.TESTNET:
                print(f"   Fund it: https://friendbot.stellar.org/?addr={account_id}")
            return {}

        print(f"\n📬 Account: {account_id}")
        print(f"   Sequence: {account['sequence']}")
        print("\n💰 Balances:")
        for balance in account.get("balances", []):
            if balance.get("asset_type") == "native":
                label = "XLM"
            else:
                label = f"{balance['asset_code']}:{balance['asset_issuer'][:8]}..."
            print(f"   {label:<24} {balance['balance']}")

        return account

    finally:
        await horizon.disconnect()


def main():
    parser = argparse.ArgumentParser(description="Check a Stellar account")
    parser.add_argument("account_id", help="Account id (G...)")
    parser.add_argument(
        "--network", "-n",
        choices=[n.value for n in NetworkType],
        default="testnet",
        help="Stellar network (default: testnet)"
    )

    args = parser.parse_args()
    asyncio.run(check_account(args.account_id, args.network))


if __name__ == "__main__":
    main()
