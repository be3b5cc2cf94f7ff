"""Interactive technical-support ticket desk."""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import IO

from ticketdesk.extra import clear_screen, wait_for_key
from ticketdesk.linkedlist import LinkedList

DEFAULT_PRIORITY = 3
RULE = "=" * 77

MENU_LINES = (
    "========================================",
    "----------- Servicio Tecnico -----------",
    "========================================",
    "1) Registrar ticket",
    "2) Asignar prioridad al ticket",
    "3) Mostrar lista de tickets pendientes",
    "4) Procesar siguiente ticket",
    "5) Buscar ticket ",
    "6) Salir",
)

EMPTY_TABLE = "No hay tickets pendientes. \n"


@dataclass
class Ticket:
    """A support request waiting to be processed."""

    ticket_id: str
    description: str
    priority: int = DEFAULT_PRIORITY
    registered_at: float = field(default_factory=time.time)


def show_main_menu(output: IO[str] | None = None) -> None:
    """Write the main menu."""
    target = sys.stdout if output is None else output
    for line in MENU_LINES:
        print(line, file=target)


def register_ticket(tickets: LinkedList, ticket_id: str, description: str) -> Ticket:
    """Create a ticket with default priority, append it and return it."""
    ticket = Ticket(ticket_id, description)
    tickets.push_back(ticket)
    return ticket


def format_ticket_table(tickets: Iterable[Ticket]) -> str:
    """Render pending tickets as a text table."""
    rows = [
        "| %-2d | %-15s | %-10d | %-25.25s | %-8s |"
        % (
            index,
            ticket.ticket_id,
            ticket.priority,
            ticket.description,
            time.strftime("%H:%M:%S", time.localtime(ticket.registered_at)),
        )
        for index, ticket in enumerate(tickets, start=1)
    ]
    if not rows:
        return EMPTY_TABLE
    header = "| %-2s | %-15s | %-13s | %-9s | %-20s |" % (
        "#",
        "ID",
        "Prioridad",
        "Descripcion",
        "Hora",
    )
    lines = ["", "Tickets pendientes: ", RULE, header, RULE, *rows, RULE]
    return "\n".join(lines) + "\n"


def _prompt(text: str) -> str | None:
    print(text, end="", flush=True)
    line = sys.stdin.readline()
    return line if line else None


def _read_word(text: str) -> str | None:
    """Prompt, then return the first word typed, skipping blank lines."""
    line = _prompt(text)
    while line is not None:
        words = line.split()
        if words:
            return words[0]
        line = sys.stdin.readline() or None
    return None


def _register_interactively(tickets: LinkedList) -> bool:
    print("Registrar nuevo ticket")
    ticket_id = _read_word("Ingrese su ID: ")
    if ticket_id is None:
        return False
    description = _prompt("Describa el problema: ")
    if description is None:
        return False
    ticket = register_ticket(tickets, ticket_id, description.rstrip("\n"))
    print(f"El ticket {ticket.ticket_id} ha sido registrado correctamente.")
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu until the user chooses to leave."""
    tickets = LinkedList()
    option = ""
    while option != "6":
        clear_screen()
        show_main_menu()
        line = _prompt("Ingrese su opcion: ")
        if line is None:
            break
        stripped = line.strip()
        option = stripped[:1]

        if option == "1":
            if not _register_interactively(tickets):
                break
        elif option == "3":
            print(format_ticket_table(tickets), end="")
        elif option in ("2", "4", "5"):
            pass
        elif option == "6":
            print("Saliendo del sistema de gestion de tickets...")
        else:
            print("Opción no válida. Por favor, intente de nuevo.")
        wait_for_key()

    tickets.clean()
    return 0