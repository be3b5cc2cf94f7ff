# ticketdesk

ticketdesk is a small console program for a technical-service desk. You can
register tickets, each with an ID and a description of the problem, and list
the pending tickets in a table. The package also contains the small container
types that the program is built on.

## Installation

```
pip install .
```

## Running the help desk

```
ticketdesk
```

The program clears the screen with the `clear` command and then shows a menu
in Spanish. The menu returns after every choice:

1. Registrar ticket: the program asks for an ID and a description. Only the
   first word typed counts as the ID. A new ticket gets priority 3 and the
   current time.
2. Asignar prioridad al ticket
3. Mostrar lista de tickets pendientes: prints a table with the number, ID,
   priority, description and local time (`HH:MM:SS`) of each ticket. The
   description is cut to 25 characters. If there are no tickets, it prints
   "No hay tickets pendientes."
4. Procesar siguiente ticket
5. Buscar ticket
6. Salir: leaves the program.

Any other choice prints an "Opción no válida" message. After each choice the
program waits until you press Enter. The program also ends when its input
runs out.

## What it does not do

- Options 2, 4 and 5 appear in the menu, but choosing one of them does
  nothing. You cannot change a ticket's priority, process tickets or search
  for one.
- Tickets are kept only in memory. They are lost when the program exits.

## Using it from Python

```python
from ticketdesk.app import register_ticket, format_ticket_table
from ticketdesk.linkedlist import LinkedList

tickets = LinkedList()
register_ticket(tickets, "A-17", "Printer does not turn on")
print(format_ticket_table(tickets), end="")
```

`ticketdesk.app` provides:

- `Ticket`: a dataclass with `ticket_id`, `description`, `priority` (default
  3) and `registered_at` (a timestamp, default now).
- `register_ticket(tickets, ticket_id, description)`: appends a new ticket
  and returns it.
- `format_ticket_table(tickets)`: returns the table text.
- `show_main_menu(output)`: writes the menu to `output`, or to standard
  output if `output` is not given.
- `main()`: runs the interactive menu.

## Container types

- `ticketdesk.linkedlist.LinkedList`: an ordered list with a cursor. It
  supports `len()` and iteration, and it can be built from an iterable.
  - Walking the list: `first()` and `next()`.
  - Adding items: `push_front`, `push_back` and `push_current`, which inserts
    after the cursor.
  - Removing items: `pop_front`, `pop_back` and `pop_current`.
  - Also: `sorted_insert(data, lower_than)` and `clean()`.
  - Reading or removing past either end returns `None`.
- `ticketdesk.heap.Heap`: a max-priority queue with `push(data, priority)`,
  `top()` and `pop()`. `top()` returns `None` when the heap is empty.
  `pop()` raises `IndexError` when the heap is empty.
- `ticketdesk.mapping.Map`, `MultiMap` and `Set`: collections backed by a
  list.
  - Keys are compared with an `is_equal` function (default `==`).
    Alternatively, pass a keyword-only `lower_than` function; the entries are
    then kept sorted by key.
  - `Map` ignores a second insert of a key it already holds. `MultiMap` keeps
    every insert.
  - `Map` and `MultiMap` have `insert`, `remove`, `search`, `first`, `next`
    and `clean`. Entries are `MapPair` objects with `key` and `value`.
  - `Set` has `insert`, `remove`, `search` and `clean`.
- `ticketdesk.stackqueue.Stack` and `Queue`: a LIFO stack
  (`push`/`top`/`pop`/`clean`) and a FIFO queue
  (`insert`/`remove`/`front`/`clean`). On an empty container, `top`, `pop`,
  `remove` and `front` return `None`.

## Helpers

`ticketdesk.extra` provides:

- `read_csv_line(file, separator)`: reads one line of a text file and splits
  it into fields. Fields may be quoted. It returns `None` at the end of the
  file. The separator must be a single character; anything else raises
  `ValueError`.
- `split_string(text, delim)`: splits text on any character of `delim` and
  trims spaces from each token. Empty pieces are dropped.
- `clear_screen()`: runs the `clear` command. If the command is not
  available, it does nothing.
- `wait_for_key(stream)`: prints a prompt and waits for a line on `stream`,
  or on standard input if `stream` is not given.

## Tests

```
pip install .[test]
pytest
```