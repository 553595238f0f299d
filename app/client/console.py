# app/client/console.py

import asyncio
import logging

from app.client.api import ConfessionsAPI
from app.client.render import render
from app.client.state import ConfessionWall, InvalidTransition
from app.core.config import configure_logging, settings

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"quit", "exit", "q"}


def _parse_id(arg: str) -> int:
    try:
        return int(arg.lstrip("#"))
    except ValueError:
        raise InvalidTransition(f"Not a confession id: {arg!r}")


async def dispatch(wall: ConfessionWall, line: str) -> None:
    """Apply one console command to the wall"""
    command, _, arg = line.strip().partition(" ")
    command = command.lower()
    arg = arg.strip()

    if command == "start":
        wall.start()
    elif command == "browse":
        await wall.browse()
    elif command == "back":
        await wall.back()
    elif command == "add":
        wall.add()
    elif command == "refresh":
        await wall.refresh()
    elif command == "open":
        try:
            wall.select(wall.find(_parse_id(arg)))
        except KeyError:
            raise InvalidTransition(f"No confession #{arg} on the wall")
    elif command == "like":
        if arg:
            await wall.like(_parse_id(arg))
        elif wall.view.kind == "detail":
            await wall.like(wall.view.confession.id)
        else:
            raise InvalidTransition("Which confession? Use: like <id>")
    elif command == "write":
        wall.edit(arg)
    elif command == "send":
        await wall.submit()
    else:
        raise InvalidTransition(f"Unknown command: {command}")


async def run(wall: ConfessionWall) -> None:
    print(render(wall))
    while True:
        line = await asyncio.to_thread(input, "> ")
        if line.strip().lower() in QUIT_COMMANDS:
            break
        if not line.strip():
            continue
        try:
            await dispatch(wall, line)
        except InvalidTransition as e:
            print(e)
            continue
        print()
        print(render(wall))


async def _main() -> None:
    api = ConfessionsAPI(settings.API_BASE_URL)
    try:
        await run(ConfessionWall(api))
    finally:
        await api.aclose()


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    logger.info(f"Connecting to {settings.API_BASE_URL}")
    try:
        asyncio.run(_main())
    except (EOFError, KeyboardInterrupt):
        pass


if __name__ == "__main__":
    main()
