"""Todo list that shows new items before the server confirms them.

Run with ``python examples/02_todo_list/app.py``.
"""
import asyncio
import random

from rich.console import Console

from optimistic import OptimisticCell, capture_async, get_combiner
from optimistic.utils.display import describe
from optimistic.utils.events import Transitioned, subscribe

console = Console()
todos: OptimisticCell[list] = OptimisticCell([], name="todos")
append = get_combiner("append")


@subscribe(Transitioned)
def _render(evt: Transitioned):
    console.print(f"[magenta]{evt.op:>7}[/] ", describe(evt.after))


async def save_on_server(title: str) -> str:
    await asyncio.sleep(0.2)
    if random.random() < 0.3:
        raise ConnectionError("server unreachable")
    return title.strip().capitalize()  # server normalizes the title


async def add_todo(title: str) -> None:
    todos.update(lambda items: append(items, title))
    outcome = await capture_async(save_on_server(title))
    todos.try_(outcome, append)


async def main() -> None:
    for title in ["buy milk ", "water plants", "call mum"]:
        await add_todo(title)
    console.print("final:", todos.value)


if __name__ == "__main__":
    asyncio.run(main())
