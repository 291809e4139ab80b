"""Markdown logger for gameplay events (runs, ability use, game over)."""

import datetime


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str, title: str = "Skillshot Dodge"):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        title : str, optional
            Heading written at the top of the log
        """
        self.log_file = log_file
        self.title = title
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write(f"# {self.title} Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Game Events\n\n")
                f.write("| Timestamp | Event | Position (x,y) | Details |\n")
                f.write("|-----------|-------|----------------|---------|\n")
        except Exception as e:
            print(f"Failed to initialize log file: {e}")

    def _write_row(self, event: str, pos: str, details: str) -> None:
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {pos} | {details} |\n")
        except Exception as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_run_start(self, run: int) -> None:
        """Log the start of a run."""
        self._write_row("RUN START", "-", f"Run #{run}")

    def log_ability(self, name: str, pos: tuple[float, float]) -> None:
        """
        Log an ability use.

        Parameters
        ----------
        name : str
            Ability name, e.g. "DASH" or "FLASH"
        pos : Tuple[float, float]
            Avatar center when the ability fired
        """
        self._write_row(name.upper(), f"({int(pos[0])}, {int(pos[1])})", "")

    def log_game_over(self, score: float, high_score: int, new_record: bool) -> None:
        """
        Log the end of a run.

        Parameters
        ----------
        score : float
            Seconds survived
        high_score : int
            High score after this run
        new_record : bool
            Whether this run set the high score
        """
        details = f"Score {int(score)}, High score {high_score}"
        if new_record:
            details += ", NEW RECORD"
        self._write_row("GAME OVER", "-", details)
