"""
会话控制器测试
Session Controller Tests
"""
import pytest

from rps_cli.game import Move, SessionController, SessionState, Statistics


@pytest.fixture
def make_controller(store, console, make_prompter, make_engine):
    def factory(answers, moves=(Move.ROCK,), statistics=None, controller_store=None):
        engine_store = controller_store or store
        return SessionController(
            engine=make_engine(list(moves), engine_store=engine_store),
            store=engine_store,
            prompter=make_prompter(answers),
            console=console,
            statistics=statistics
        )
    return factory


def test_quit_from_menu(make_controller, output):
    controller = make_controller(["4"])
    assert controller.run() == Statistics()
    assert controller.get_current_state() == SessionState.EXITING
    assert "Thanks for playing! Goodbye!" in output.text


def test_play_one_round_then_return_to_menu(make_controller, store, output):
    controller = make_controller(["1", "rock", "n", "", "quit"], moves=[Move.SCISSORS])
    final = controller.run()

    assert final == Statistics(wins=1, losses=0, ties=0, total_games=1)
    assert store.load() == final
    assert "You chose: 🪨 ROCK" in output.text
    assert "Computer chose: ✂️ SCISSORS" in output.text
    assert "🎉 You win!" in output.text
    assert not controller.persistence_failed


def test_play_again_keeps_the_game_loop(make_controller, store):
    answers = ["1", "rock", "y", "paper", "n", "", "4"]
    controller = make_controller(answers, moves=[Move.ROCK, Move.ROCK])
    final = controller.run()

    assert final == Statistics(wins=1, losses=0, ties=1, total_games=2)
    assert store.load() == final


def test_back_to_menu_leaves_statistics_alone(make_controller, stats_path):
    before = Statistics(wins=1, losses=1, ties=0, total_games=2)
    controller = make_controller(["1", "back", "", "4"], statistics=before)

    assert controller.run() == before
    assert not stats_path.exists()


def test_interrupt_during_game_exits_without_change(make_controller, stats_path, output):
    before = Statistics(losses=3, total_games=3)
    controller = make_controller(["1", KeyboardInterrupt], statistics=before)

    assert controller.run() == before
    assert controller.get_current_state() == SessionState.EXITING
    assert not stats_path.exists()
    assert "Goodbye!" in output.text
    assert "Thanks for playing" not in output.text
    assert "Error" not in output.text


def test_closed_input_on_menu_exits(make_controller):
    controller = make_controller([])
    controller.run()
    assert controller.get_current_state() == SessionState.EXITING


def test_interrupt_after_committed_round_keeps_it(make_controller, store):
    controller = make_controller(["1", "paper", KeyboardInterrupt], moves=[Move.ROCK])
    final = controller.run()
    assert final == Statistics(wins=1, total_games=1)
    assert store.load() == final


def test_view_statistics(make_controller, output):
    stats = Statistics(wins=3, losses=1, ties=0, total_games=4)
    controller = make_controller(["2", "", "4"], statistics=stats)
    controller.run()

    assert "🏆 Wins: 3" in output.text
    assert "💔 Losses: 1" in output.text
    assert "🎯 Total Games: 4" in output.text
    assert "📈 Win Rate: 75.0%" in output.text


def test_reset_confirmed(make_controller, store, output):
    store.save(Statistics(wins=3, losses=1, ties=1, total_games=5))
    controller = make_controller(["3", "y", "", "4"], statistics=store.load())

    assert controller.run() == Statistics(0, 0, 0, 0)
    assert store.load() == Statistics(0, 0, 0, 0)
    assert "Statistics have been reset!" in output.text


def test_reset_declined(make_controller, store, output):
    before = Statistics(wins=3, losses=1, ties=1, total_games=5)
    store.save(before)
    controller = make_controller(["3", "", "", "4"], statistics=before)

    assert controller.run() == before
    assert store.load() == before
    assert "Reset cancelled." in output.text


def test_save_failure_is_reported_and_round_still_shown(make_controller, failing_store, output):
    controller = make_controller(
        ["1", "rock", "n", "", "4"], moves=[Move.PAPER], controller_store=failing_store
    )
    final = controller.run()

    assert final == Statistics(losses=1, total_games=1)
    assert "😞 You lose!" in output.text
    assert "Could not save statistics" in output.text
    assert controller.persistence_failed


def test_play_single_with_preset_move(make_controller, store, output):
    controller = make_controller([], moves=[Move.PAPER])
    result = controller.play_single("paper")

    assert result.statistics == Statistics(ties=1, total_games=1)
    assert store.load() == result.statistics
    assert "Updated Statistics:" in output.text
    assert controller.get_current_state() == SessionState.MAIN_MENU
    assert "What would you like to do?" not in output.text


def test_play_single_invalid_move_falls_back_to_prompt(make_controller, output):
    controller = make_controller(["3"], moves=[Move.PAPER])
    result = controller.play_single("lizard")

    assert result.player_move == Move.SCISSORS
    assert "'lizard' is not a valid move." in output.text


def test_play_single_cancelled(make_controller, stats_path, output):
    controller = make_controller([KeyboardInterrupt])
    assert controller.play_single(None) is None
    assert "Move selection cancelled." in output.text
    assert not stats_path.exists()
