#!/usr/bin/env python3
"""
End-to-end demo script for the transaction timeline service.

Prerequisites:
    uvicorn closing_agent.main:app --port 8000

Usage:
    python scripts/e2e_demo.py

    # Upload an offer document first and use the extracted facts:
    python scripts/e2e_demo.py --file path/to/offer.pdf

    # Save the printable report:
    python scripts/e2e_demo.py --report timeline.html

    # Print the plain-text report:
    python scripts/e2e_demo.py --text

    # Output raw JSON:
    python scripts/e2e_demo.py --json
"""

import argparse
import json
import sys
from pathlib import Path

import httpx

# Configuration
API_BASE = "http://localhost:8000"

SAMPLE_FACTS = {
    "propertyAddress": "1560 S 26th ST, Milwaukee, WI 53204",
    "salePrice": "250000",
    "buyerName": "Declan Roddy",
    "sellerName": "SUV Properties LLC",
    "acceptanceDate": "2025-09-09",
    "closingDate": "2025-10-10",
    "inspectionPeriod": "15",
    "appraisalPeriod": "20",
    "financingDeadline": "25",
}


def check_health(client: httpx.Client) -> bool:
    """Check if API is healthy."""
    try:
        resp = client.get(f"{API_BASE}/health")
        return resp.status_code == 200
    except httpx.RequestError:
        return False


def upload_offer(client: httpx.Client, file_path: Path) -> dict:
    """Upload an offer document and return the extraction payload."""
    content_type = "application/pdf" if file_path.suffix.lower() == ".pdf" else "text/plain"
    with open(file_path, "rb") as f:
        files = {"file": (file_path.name, f, content_type)}
        resp = client.post(f"{API_BASE}/api/extract", files=files)
        resp.raise_for_status()
        return resp.json()


def generate(client: httpx.Client, facts: dict) -> dict:
    """Compute timeline, emails and warnings."""
    resp = client.post(f"{API_BASE}/api/generate", json=facts)
    resp.raise_for_status()
    return resp.json()


def fetch_report(client: httpx.Client, facts: dict, fmt: str = "html") -> str:
    """Fetch the printable report as HTML or plain text."""
    resp = client.post(f"{API_BASE}/api/report", json=facts, params={"format": fmt})
    resp.raise_for_status()
    return resp.text


def print_generation(data: dict) -> None:
    """Pretty print a generation result."""
    print("\n" + "=" * 60)
    print("TRANSACTION TIMELINE")
    print("=" * 60)

    if not data.get("ready"):
        print("\nNo acceptance date - timeline not computed.")
    for m in data.get("milestones", []):
        marker = "*" if m["agentAction"] else " "
        print(f" {marker} {m['date']}  {m['task']:<34} {m['responsible']:<14} {m['priority']}")

    if data.get("warnings"):
        print("\n--- Warnings ---")
        for w in data["warnings"]:
            print(f"  ! {w}")

    print("\n--- Email drafts ---")
    for e in data.get("emails", []):
        print(f"  {e['title']}: {e['subject']}")

    print("\n" + "=" * 60)


def main():
    parser = argparse.ArgumentParser(description="E2E demo for the transaction timeline service")
    parser.add_argument("--file", type=Path, help="Offer document to upload")
    parser.add_argument("--report", type=Path, help="Write the printable HTML report here")
    parser.add_argument("--json", action="store_true", help="Output raw JSON")
    parser.add_argument("--text", action="store_true", help="Print the plain-text report")
    args = parser.parse_args()

    if args.file and not args.file.exists():
        print(f"Error: file not found: {args.file}")
        sys.exit(1)

    with httpx.Client(timeout=30) as client:
        if not check_health(client):
            print("Error: API is not responding. Start it with uvicorn first.")
            sys.exit(1)

        facts = dict(SAMPLE_FACTS)
        if args.file:
            extraction = upload_offer(client, args.file)
            extracted = extraction.get("extracted")
            if extracted is None:
                print(f"{extraction['message']}; using sample facts")
            else:
                facts.update({k: v for k, v in extracted.items() if v is not None})

        data = generate(client, facts)
        if args.json:
            print(json.dumps(data, indent=2))
        elif args.text:
            print(fetch_report(client, facts, fmt="text"))
        else:
            print_generation(data)

        if args.report:
            args.report.write_text(fetch_report(client, facts), encoding="utf-8")
            print(f"Report written to {args.report}")


if __name__ == "__main__":
    main()
