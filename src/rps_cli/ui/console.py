"""
控制台输出
Console Rendering
"""
from typing import Callable
from ..game.game_logic.game_engine import RoundResult
from ..game.game_logic.game_rules import Outcome
from ..game.game_logic.statistics import Statistics

_OUTCOME_MESSAGES = {
    Outcome.WIN: "🎉 You win!",
    Outcome.LOSS: "😞 You lose!",
    Outcome.TIE: "🤝 It's a tie!",
}


class Console:
    """游戏文本输出"""

    def __init__(self, write: Callable[[str], None] = print):
        self.write = write

    def _banner(self, title: str):
        self.write(f"\n{title}")
        self.write("=" * 36 + "\n")

    def welcome(self):
        self._banner("🎮 Rock-Paper-Scissors CLI Game 🎮")

    def new_game(self):
        self._banner("🕹️  New Game 🕹️")

    def show_round(self, result: RoundResult):
        """显示双方出拳和结果"""
        player, opponent = result.player_move, result.opponent_move
        self.write(f"\nYou chose: {player.emoji} {player.value.upper()}")
        self.write(f"Computer chose: {opponent.emoji} {opponent.value.upper()}")
        self.write(f"\n{_OUTCOME_MESSAGES[result.outcome]}")

    def show_statistics(self, statistics: Statistics):
        self._banner("📊 Game Statistics 📊")
        self.write(f"🏆 Wins: {statistics.wins}")
        self.write(f"💔 Losses: {statistics.losses}")
        self.write(f"🤝 Ties: {statistics.ties}")
        self.write(f"🎯 Total Games: {statistics.total_games}")
        self.write(f"📈 Win Rate: {statistics.win_rate:.1f}%\n")

    def show_updated_statistics(self, statistics: Statistics):
        self.write("\nUpdated Statistics:")
        self.write(f"Wins: {statistics.wins}")
        self.write(f"Losses: {statistics.losses}")
        self.write(f"Ties: {statistics.ties}")

    def info(self, text: str):
        self.write(text)

    def success(self, text: str):
        self.write(f"✅ {text}")

    def warning(self, text: str):
        self.write(f"⚠️  {text}")

    def error(self, text: str):
        self.write(f"❌ {text}")

    def goodbye(self, text: str = "Goodbye! 👋"):
        self.write(f"\n{text}\n")
