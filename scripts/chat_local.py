#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP, no Firestore).

Usage:
  python3 scripts/chat_local.py [--chat-id local_chat_1] [--shop demo] [--name Cliente]

What it does:
- Keeps a stable chat_id for the session
- Sends your typed messages through the same HandleIncomingMessageUseCase
- Prints the detected intent, the resulting conversation status and the replies
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.domain.entities.message import InboundMessage  # noqa: E402
from app.infrastructure.catalog.demo_data import DEMO_BARBERSHOP_ID  # noqa: E402
from app.wiring.dependencies import get_container  # noqa: E402


def _print_header(chat_id: str, shop_id: str) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"chat_id: {chat_id}  barbershop: {shop_id}")
    print("Type your message and press Enter.")
    print("Commands: /new (new chat), /reset (clear context), /quit, /help")
    print("-" * 60)


def main() -> None:
    parser = argparse.ArgumentParser(description="Chat with the booking assistant locally.")
    parser.add_argument("--chat-id", default="local_chat_1")
    parser.add_argument("--shop", default=DEMO_BARBERSHOP_ID)
    parser.add_argument("--client-id", default="local_client")
    parser.add_argument("--name", default="Cliente")
    args = parser.parse_args()

    container = get_container()
    use_case = container["use_case"]
    chat_id = args.chat_id
    _print_header(chat_id, args.shop)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nTchau!")
            return

        if not user_text:
            continue

        cmd = user_text.lower()
        if cmd in ("/quit", "/exit"):
            print("Tchau!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /new   -> start a new chat_id")
            print("  /reset -> discard the current conversation context")
            print("  /quit  -> exit")
            continue
        if cmd == "/new":
            chat_id = f"local_chat_{int(time.time())}"
            print(f"New chat_id: {chat_id}")
            continue
        if cmd == "/reset":
            cleared = use_case.clear(chat_id)
            print("Context cleared." if cleared else "No context to clear.")
            continue

        message = InboundMessage(
            chat_id=chat_id,
            barbershop_id=args.shop,
            client_id=args.client_id,
            client_name=args.name,
            text=user_text,
        )
        result = use_case.handle(message)

        print("\n--- Decision ---")
        print(f"intent: {result.intent.value}")
        print(f"action: {result.action}")
        print(f"status: {result.status or '(conversation closed)'}")

        print("\n--- Reply ---")
        for reply in result.replies:
            print(reply.content.strip())
            if reply.appointment_data:
                print(f"[appointment] {reply.appointment_data}")

        print("-" * 60)


if __name__ == "__main__":
    main()
