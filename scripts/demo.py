#!/usr/bin/env python3
"""
Smoke-test script for the Lease Tracker API.

Prerequisites:
    uvicorn lease_tracker.main:app --port 8000

Usage:
    python scripts/demo.py

    # Keep the demo contract afterwards:
    python scripts/demo.py --keep

    # Output raw JSON:
    python scripts/demo.py --json
"""

import argparse
import json
import sys
from datetime import date, timedelta

import httpx

# Configuration
API_BASE = "http://localhost:8000"


def check_health(client: httpx.Client) -> bool:
    """Check if API is healthy."""
    try:
        resp = client.get(f"{API_BASE}/health")
        return resp.status_code == 200
    except httpx.RequestError:
        return False


def demo_form() -> dict:
    """A contract whose notice deadline falls in the warning band."""
    today = date.today()
    return {
        "contractName": "Demo - Local 12, Main St.",
        "signatureDate": (today - timedelta(days=300)).isoformat(),
        "durationMonths": 24,
        "avisoDate": (today + timedelta(days=20)).isoformat(),
        "monthlyAmount": 1000,
        "escalationFixedIncrement": 25,
        "escalationMaxMonths": 12,
        "regimeAmount": 1200,
    }


def upload_file(client: httpx.Client) -> dict:
    files = {"file": ("demo-contract.pdf", b"%PDF-1.4 demo", "application/pdf")}
    resp = client.post(f"{API_BASE}/api/upload", files=files)
    resp.raise_for_status()
    return resp.json()


def print_table(rows: list[dict]) -> None:
    print(f"  {'Month':>5}  {'Amount':>10}")
    for row in rows:
        print(f"  {row['month']:>5}  {row['amount']:>10.2f}")


def main():
    parser = argparse.ArgumentParser(description="Smoke test for the Lease Tracker API")
    parser.add_argument("--keep", action="store_true", help="Do not delete the demo contract")
    parser.add_argument("--json", action="store_true", help="Output raw JSON")
    args = parser.parse_args()

    print("=" * 60)
    print("LEASE TRACKER - DEMO")
    print("=" * 60)

    with httpx.Client(timeout=10.0) as client:
        print("\n[1/5] Checking API health...")
        if not check_health(client):
            print("  Error: API is not responding. Start it with uvicorn first.")
            sys.exit(1)
        print("  API is healthy")

        print("\n[2/5] Uploading reference file...")
        uploaded = upload_file(client)
        print(f"  URL: {uploaded['url']}")

        print("\n[3/5] Saving contract...")
        form = demo_form()
        form["fileRef"] = {"name": "demo-contract.pdf", "size": 13, "url": uploaded["url"]}
        try:
            resp = client.post(f"{API_BASE}/api/contracts", json=form)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            print(f"  Error saving: {e.response.text}")
            sys.exit(1)
        contract = resp.json()
        contract_id = contract["id"]
        print(f"  Contract ID: {contract_id}")
        print(f"  End date: {contract['endDate']}")

        print("\n[4/5] Escalation schedule...")
        schedule = client.get(f"{API_BASE}/api/contracts/{contract_id}/escalation").json()
        print_table(schedule["rows"])

        print("\n[5/5] Dashboard...")
        panel = client.get(f"{API_BASE}/api/dashboard/semaphore").json()
        for item in panel["items"]:
            days = item["daysUntilAviso"] if item["daysUntilAviso"] is not None else "-"
            print(f"  [{item['semaphore']:>8}] {item['contractName'] or item['id']} (days: {days})")
        summary = client.get(f"{API_BASE}/api/dashboard/summary").json()
        print(f"  Total contracts: {summary['totalContracts']}")
        print(f"  Monthly total: {summary['totalMonthlyAmount']:,.2f}")
        print(f"  With file: {summary['contractsWithFile']}")

        if args.json:
            exported = client.get(f"{API_BASE}/api/contracts/{contract_id}/export")
            print(json.dumps(exported.json(), indent=2))

        if not args.keep:
            client.delete(f"{API_BASE}/api/contracts/{contract_id}")
            print("\n  Demo contract removed")

    print("\n" + "=" * 60)
    print("DONE")
    print("=" * 60)
    sys.exit(0)


if __name__ == "__main__":
    main()
