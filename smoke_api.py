#!/usr/bin/env python3
"""
Smoke script for the Medication Search API.
Sends a search query to a running server and displays the response.
"""

import json
import sys
import requests

API_URL = "http://127.0.0.1:5175/api/v1"

def print_section(title, medications):
    print(f"\n{title}:")
    if not medications:
        print("   Nenhum medicamento encontrado.")
        return
    for i, med in enumerate(medications, 1):
        print(f"{i}. {med['name']} ({med['category']})")

def run_search(query, api_key="dev_key"):
    """Run a search against the API and print the result buckets."""
    # API key should match the one in config.py
    headers = {"X-API-Key": api_key}

    print(f"Searching for '{query}'...")

    try:
        response = requests.get(f"{API_URL}/search", params={"query": query}, headers=headers)

        if response.status_code != 200:
            print(f"Error: API returned status code {response.status_code}")
            print(response.text)
            return

        result = response.json()
        if "--raw" in sys.argv:
            print(json.dumps(result, indent=2, ensure_ascii=False))

        if result.get("symptom_alert"):
            print(f"\n⚠️  {result['symptom_alert']}")

        print_section(f'Medicamentos com nome "{query}"', result["exact"])
        print_section("Medicamentos similares", result["similar"])
        print_section(f'Medicamentos para sintoma "{query}"', result["forSymptom"])

    except requests.RequestException as e:
        print(f"Error calling API: {e}")

if __name__ == "__main__":
    args = [arg for arg in sys.argv[1:] if arg != "--raw"]
    if not args:
        print("Usage: python smoke_api.py <query> [--raw]")
        sys.exit(1)

    run_search(" ".join(args))
