import pytest

from metro.config import AppConfig, ShellConfig
from metro.shell import CommandDispatcher, main, run_shell


class ScriptedConsole:
    """Feeds scripted answers to run_shell and records its output."""

    def __init__(self, *answers):
        self._answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt):
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def output(self, text):
        self.lines.append(text)

    @property
    def text(self):
        return "\n".join(self.lines)


@pytest.fixture
def dispatcher(demo_network):
    return CommandDispatcher(demo_network)


class TestCommandDispatcher:
    def test_fare(self, dispatcher):
        assert (
            dispatcher.dispatch("fare", "A", "C")
            == "The fare between stations A and C is $16."
        )

    def test_list_stations(self, dispatcher):
        dispatcher.dispatch("add-station", "AA")

        assert dispatcher.dispatch("list-stations") == "Stations: A AA B C D"

    def test_show_network(self, dispatcher):
        assert dispatcher.dispatch("show-network").splitlines() == [
            "Station A Neighbors: B(5 units) D(7 units)",
            "Station B Neighbors: A(5 units) C(3 units)",
            "Station C Neighbors: B(3 units) D(4 units)",
            "Station D Neighbors: C(4 units) A(7 units)",
        ]

    def test_show_empty_network(self, network):
        assert (
            CommandDispatcher(network).dispatch("show-network")
            == "The metro network is empty."
        )

    def test_route(self, dispatcher):
        assert (
            dispatcher.dispatch("route", "A", "C")
            == "Shortest route from A to C: A -> B -> C (8 units)"
        )

    def test_errors_become_messages(self, dispatcher):
        assert (
            dispatcher.dispatch("add-station", "A")
            == "Station A already exists in the metro network"
        )
        assert (
            dispatcher.dispatch("remove-connection", "A", "C")
            == "No connection found between A and C"
        )
        assert (
            dispatcher.dispatch("fare", "A", "Z")
            == "Station Z not found in the metro network"
        )

    def test_no_route_message(self, dispatcher):
        dispatcher.dispatch("add-station", "E")

        assert (
            dispatcher.dispatch("fare", "A", "E")
            == "No valid route between A and E"
        )

    def test_bad_distance(self, dispatcher, demo_network):
        message = dispatcher.dispatch("add-connection", "A", "C", "far")

        assert message.startswith("Invalid distance")
        assert demo_network.fare_between("A", "C") == 16

    def test_negative_distance(self, dispatcher):
        message = dispatcher.dispatch("add-connection", "A", "C", "-4")

        assert message == "Distance must be a non-negative integer, got -4"

    @pytest.mark.parametrize("name", ["", "Central Park", "Tab\tStop"])
    def test_station_name_must_be_one_word(self, dispatcher, demo_network, name):
        message = dispatcher.dispatch("add-station", name)

        assert message.startswith("Invalid station name")
        assert demo_network.list_stations() == ["A", "B", "C", "D"]

    def test_wrong_arity(self, dispatcher):
        assert (
            dispatcher.dispatch("fare", "A")
            == "Wrong number of arguments for fare"
        )

    def test_unknown_command(self, dispatcher):
        assert dispatcher.dispatch("teleport") == "Unknown command: 'teleport'"

    def test_commands_listed(self, dispatcher):
        assert "remove-station" in dispatcher.commands


class TestRunShell:
    def test_add_station_then_exit(self, network):
        console = ScriptedConsole("1", "Central", "7")

        assert run_shell(network, console.input, console.output) == 0

        assert "Station Central added to the metro network." in console.lines
        assert console.lines[-1] == "Exiting the program."
        assert network.list_stations() == ["Central"]

    def test_connection_and_fare(self, demo_network):
        console = ScriptedConsole("2", "A C", "1", "3", "A", "C", "7")

        run_shell(demo_network, console.input, console.output)

        assert "Connection between A and C added to the metro network." in console.lines
        assert "The fare between stations A and C is $2." in console.lines
        assert "Enter the distance between A and C: " in console.prompts

    def test_spaced_or_blank_station_name_is_rejected(self, demo_network):
        console = ScriptedConsole("1", "Central Park", "1", "   ", "7")

        run_shell(demo_network, console.input, console.output)

        assert (
            sum(line.startswith("Invalid station name") for line in console.lines)
            == 2
        )
        assert demo_network.list_stations() == ["A", "B", "C", "D"]

    def test_connection_needs_two_names(self, demo_network):
        console = ScriptedConsole("2", "A", "7")

        run_shell(demo_network, console.input, console.output)

        assert "Please enter exactly two station names." in console.lines

    def test_display_remove_station_and_connection(self, demo_network):
        console = ScriptedConsole("6", "A B", "5", "D", "4", "7")

        run_shell(demo_network, console.input, console.output)

        assert "Connection between A and B removed." in console.lines
        assert "Station D removed from the metro network." in console.lines
        assert "Station A Neighbors:" in console.text
        assert demo_network.list_stations() == ["A", "B", "C"]

    def test_stations_listed_before_prompt(self, demo_network):
        console = ScriptedConsole("5", "Z", "7")

        run_shell(demo_network, console.input, console.output)

        assert "Stations: A B C D" in console.lines
        assert "Station Z not found in the metro network" in console.lines

    def test_invalid_choice_reprompts(self, network):
        console = ScriptedConsole("9", "abc", "7")

        run_shell(network, console.input, console.output)

        assert (
            console.lines.count("Invalid choice. Please enter a number between 1 and 7.")
            == 2
        )

    def test_end_of_input_exits(self, network):
        console = ScriptedConsole()

        assert run_shell(network, console.input, console.output) == 0
        assert console.lines[-1] == "Exiting the program."


def test_main_seeds_demo_network(monkeypatch, capsys):
    answers = iter(["3", "A", "C", "7"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    assert main(AppConfig()) == 0

    assert "The fare between stations A and C is $16." in capsys.readouterr().out


def test_main_without_seed(monkeypatch, capsys):
    answers = iter(["4", "7"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    main(AppConfig(shell=ShellConfig(seed_demo=False)))

    assert "The metro network is empty." in capsys.readouterr().out
