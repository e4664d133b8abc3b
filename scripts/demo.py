#!/usr/bin/env python3
"""Walk through the todo store with two demo users.

Registers users, logs in, manages a handful of todos and prints every
response envelope as JSON.

Usage:
    # From project root:
    python scripts/demo.py

    # With debug logging on stderr:
    TODO_STORE_LOG_LEVEL=DEBUG python scripts/demo.py
"""

import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config import get_settings
from src.models.enums import TodoStatus
from src.services.json_response import render
from src.services.todo_service import TodoService

DEMO_EMAIL = "alice@example.com"
DEMO_PASSWORD = "password123"  # noqa: S105


def show(step: str, outcome) -> None:
    print(f"\n--- {step} ---")
    print(render(outcome))


def run_demo(service: TodoService | None = None) -> TodoService:
    """Run the demo sequence and return the service holding its state."""
    service = service or TodoService()
    print("TODO Store Simulation")

    alice = service.register_user(DEMO_EMAIL, DEMO_PASSWORD)
    show("1. User Registration", alice)
    show("1. User Registration", service.register_user("bob@example.com", "bob-secret"))
    show(
        "2. Registering with a duplicate email (expect error)",
        service.register_user(DEMO_EMAIL, "anotherpass"),
    )
    if not alice.ok:
        print("Could not register demo user. Exiting.")
        return service
    alice_id = alice.payload["userId"]

    show("3. User Login", service.login_user(DEMO_EMAIL, DEMO_PASSWORD))
    show(
        "4. Login with wrong password (expect error)",
        service.login_user(DEMO_EMAIL, "wrongpass"),
    )

    groceries = service.add_todo(alice_id, "Buy Groceries", "Milk, Bread, Eggs")
    report = service.add_todo(
        alice_id, "Finish Project Report", "Complete the final section and proofread."
    )
    dentist = service.add_todo(
        alice_id, "Schedule Dentist Appointment", "Call Dr. Smith's office."
    )
    for outcome in (groceries, report, dentist):
        show("5. Adding TODOs for Alice", outcome)
    groceries_id = groceries.payload["todo"].id
    report_id = report.payload["todo"].id

    show("6. Get All of Alice's TODOs", service.get_all_todos(alice_id))
    show(
        "7. Update a TODO (Buy Groceries -> Buy Organic Groceries)",
        service.update_todo(alice_id, groceries_id, title="Buy Organic Groceries"),
    )
    show(
        "8. Mark a TODO as Completed (Project Report)",
        service.update_todo(alice_id, report_id, status=TodoStatus.COMPLETED),
    )
    show("9. Get Only Active TODOs", service.get_active_todos(alice_id))
    show("10. Get Only Completed TODOs", service.get_completed_todos(alice_id))
    show("11. Search for TODOs containing 'dentist'", service.search_todos(alice_id, "dentist"))
    show("12. Delete a TODO", service.delete_todo(alice_id, groceries_id))
    show("13. Get All TODOs again to see the deletion", service.get_all_todos(alice_id))
    return service


if __name__ == "__main__":
    logging.basicConfig(level=get_settings().log_level.upper(), stream=sys.stderr)
    run_demo()
