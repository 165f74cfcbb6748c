"""Interactive shell for the metro network.

The shell is a boundary adapter: CommandDispatcher turns a command name
plus string arguments into one MetroNetworkService call and renders the
outcome as text, and run_shell drives the numbered menu on top of it.
Neither touches the terminal directly; input and output functions are
injected so the whole loop can be exercised in tests.
"""

from __future__ import annotations

import inspect
import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Sequence

from .config import AppConfig, ObservabilityConfig
from .domain.errors import MetroNetworkError
from .services import MetroNetworkService

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

DEMO_STATIONS = ("A", "B", "C", "D")
DEMO_CONNECTIONS = (("A", "B", 5), ("B", "C", 3), ("C", "D", 4), ("D", "A", 7))

MENU = """
Metro Network Operations:
1. Add new station
2. Add new connection between stations
3. Calculate fare between stations
4. Display metro network
5. Remove station
6. Remove connection between stations
7. Exit"""

EXIT_CHOICE = "7"


def seed_demo_network(network: MetroNetworkService) -> None:
    """Load the four-station demo network the shell starts with."""
    for name in DEMO_STATIONS:
        network.add_station(name)
    for station_a, station_b, weight in DEMO_CONNECTIONS:
        network.add_connection(station_a, station_b, weight)


@dataclass
class CommandDispatcher:
    """Translate discrete commands into MetroNetworkService calls.

    Every command returns the text to display. Domain errors and bad
    arguments come back as messages too; dispatch never raises for
    anything the user typed.
    """

    network: MetroNetworkService
    _handlers: Dict[str, Callable[..., str]] = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._handlers = {
            "add-station": self._add_station,
            "remove-station": self._remove_station,
            "add-connection": self._add_connection,
            "remove-connection": self._remove_connection,
            "fare": self._fare,
            "route": self._route,
            "list-stations": self._list_stations,
            "show-network": self._show_network,
        }

    @property
    def commands(self) -> Sequence[str]:
        return tuple(self._handlers)

    def dispatch(self, command: str, *args: str) -> str:
        handler = self._handlers.get(command)
        if handler is None:
            return f"Unknown command: {command!r}"

        try:
            inspect.signature(handler).bind(*args)
        except TypeError:
            return f"Wrong number of arguments for {command}"

        try:
            return handler(*args)
        except MetroNetworkError as e:
            self._logger.debug(
                "Command failed",
                extra={"command": command, "error": type(e).__name__},
            )
            return e.message

    def _add_station(self, name: str) -> str:
        # Names are single tokens, the connection prompts split on whitespace
        if not name or any(ch.isspace() for ch in name):
            return (
                f"Invalid station name: {name!r}. "
                "Please enter a single word with no spaces."
            )
        self.network.add_station(name)
        return f"Station {name} added to the metro network."

    def _remove_station(self, name: str) -> str:
        self.network.remove_station(name)
        return f"Station {name} removed from the metro network."

    def _add_connection(self, station_a: str, station_b: str, distance: str) -> str:
        weight = _parse_distance(distance)
        if weight is None:
            return f"Invalid distance: {distance!r}. Please enter a whole number."
        self.network.add_connection(station_a, station_b, weight)
        return (
            f"Connection between {station_a} and {station_b} "
            "added to the metro network."
        )

    def _remove_connection(self, station_a: str, station_b: str) -> str:
        self.network.remove_connection(station_a, station_b)
        return f"Connection between {station_a} and {station_b} removed."

    def _fare(self, source: str, destination: str) -> str:
        fare = self.network.fare_between(source, destination)
        return f"The fare between stations {source} and {destination} is ${fare}."

    def _route(self, source: str, destination: str) -> str:
        route = self.network.route_between(source, destination)
        return (
            f"Shortest route from {source} to {destination}: "
            f"{' -> '.join(route.path)} ({route.total_distance} units)"
        )

    def _list_stations(self) -> str:
        return "Stations: " + " ".join(self.network.list_stations())

    def _show_network(self) -> str:
        lines = []
        for entry in self.network.dump_network():
            neighbors = " ".join(
                f"{c.neighbor}({c.weight} units)" for c in entry.connections
            )
            lines.append(f"Station {entry.station} Neighbors: {neighbors}".rstrip())
        return "\n".join(lines) if lines else "The metro network is empty."


def _parse_distance(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def run_shell(
    network: MetroNetworkService,
    input_fn: Optional[InputFn] = None,
    output_fn: Optional[OutputFn] = None,
) -> int:
    """Run the numbered menu until the user exits or input ends.

    Args:
        network: The network to operate on.
        input_fn: Prompt-and-read function, ``input`` by default.
        output_fn: Display function, ``print`` by default.

    Returns:
        Process exit code (always 0).
    """
    read: InputFn = input_fn or input
    write: OutputFn = output_fn or print
    dispatcher = CommandDispatcher(network)

    def ask(prompt: str) -> str:
        return read(prompt).strip()

    def ask_pair(prompt: str) -> Optional[tuple[str, str]]:
        words = ask(prompt).split()
        if len(words) != 2:
            write("Please enter exactly two station names.")
            return None
        return words[0], words[1]

    def show_stations() -> None:
        write(dispatcher.dispatch("list-stations"))

    while True:
        write(MENU)
        try:
            choice = ask("Enter your choice (1-7): ")

            if choice == "1":
                name = ask("Enter the name of the new station: ")
                write(dispatcher.dispatch("add-station", name))

            elif choice == "2":
                show_stations()
                pair = ask_pair("Enter the names of the two stations to connect: ")
                if pair is not None:
                    distance = ask(
                        f"Enter the distance between {pair[0]} and {pair[1]}: "
                    )
                    write(dispatcher.dispatch("add-connection", *pair, distance))

            elif choice == "3":
                show_stations()
                source = ask("Enter the source station: ")
                destination = ask("Enter the destination station: ")
                write(dispatcher.dispatch("fare", source, destination))

            elif choice == "4":
                write(dispatcher.dispatch("show-network"))

            elif choice == "5":
                show_stations()
                name = ask("Enter the name of the station to remove: ")
                write(dispatcher.dispatch("remove-station", name))

            elif choice == "6":
                show_stations()
                pair = ask_pair(
                    "Enter the names of the two stations to remove connection: "
                )
                if pair is not None:
                    write(dispatcher.dispatch("remove-connection", *pair))

            elif choice == EXIT_CHOICE:
                write("Exiting the program.")
                return 0

            else:
                write("Invalid choice. Please enter a number between 1 and 7.")

        except (EOFError, KeyboardInterrupt):
            write("Exiting the program.")
            return 0


def configure_logging(config: ObservabilityConfig) -> None:
    logging.basicConfig(level=config.level, format=config.format)


def main(config: Optional[AppConfig] = None) -> int:
    """Console entry point: build the network and run the menu."""
    from .container import Container, get_container

    container = (
        Container.create_default(config) if config is not None else get_container()
    )
    config = container.config
    configure_logging(config.observability)

    network = container.resolve(MetroNetworkService)
    if config.shell.seed_demo and network.station_count == 0:
        seed_demo_network(network)

    return run_shell(network)


if __name__ == "__main__":
    sys.exit(main())
