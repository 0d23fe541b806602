"""Banners shown when the game ends or fails."""

from __future__ import annotations

from dungeonrun.tiles import CYAN, GREEN, RED, RESET, WHITE, YELLOW


def win_banner(movements: int) -> str:
    """The banner printed when the player escapes."""
    return "".join(
        [
            GREEN + "\n",
            "  **********************************************\n",
            "  *                                            *\n",
            "  *     " + YELLOW + "🎉  CONGRATULATIONS!  🎉"
            + GREEN + "             *\n",
            "  *                                            *\n",
            "  **********************************************\n",
            "  *                                            *\n",
            "  *     You've escaped with all the loot!      *\n",
            "  *     Final Movements: " + YELLOW + str(movements)
            + GREEN + "                   *\n",
            "  *                                            *\n",
            "  *     " + CYAN + "Thank you for playing so_long! 🐬"
            + GREEN + "       *\n",
            "  *                                            *\n",
            "  **********************************************\n" + RESET,
            "\n",
        ]
    )


def bonus_win_banner() -> str:
    """The banner printed when the bonus game is won."""
    return "".join(
        [
            GREEN + "\n",
            "  **********************************************\n",
            "  *                                            *\n",
            "  *     " + YELLOW + "🎉  CONGRATULATIONS!  🎉" + GREEN,
            "     \t\t        *\n",
            "  *                                            *\n",
            "  **********************************************\n",
            "  *                                            *\n",
            "  *     You've conquered the dungeon!          *\n",
            "  *     " + CYAN + "Thank you for playing so_long! 🐬" + GREEN,
            "       *\n",
            "  *                                            *\n",
            "  **********************************************\n" + RESET,
            "\n",
        ]
    )


def game_over_banner() -> str:
    """The banner printed when an enemy catches the player."""
    return "".join(
        [
            RED + "\n",
            "  ##############################################\n",
            "  #                                            #\n",
            "  #          " + WHITE + "☠️   GAME OVER  ☠️" + RED,
            "               #\n",
            "  #                                            #\n",
            "  ##############################################\n",
            "  #                                            #\n",
            "  #     The shadows have taken you...          #\n",
            "  #     " + YELLOW + "Try again to claim your glory!" + RED,
            "      #\n",
            "  #                                            #\n",
            "  ##############################################\n" + RESET,
            "\n",
        ]
    )


def error_banner(reason: str) -> str:
    """The banner printed when the plain game stops on an error."""
    return "".join(
        [
            RED + "\n",
            "  ##############################################\n",
            "  #                                            #\n",
            "  #          " + YELLOW + "⚠️   ERROR OCCURRED  ⚠️"
            + RED + "           #\n",
            "  #                                            #\n",
            "  ##############################################\n",
            "  #                                            #\n",
            f"    Reason: {reason}\n",
            "  #                                            #\n",
            "  ##############################################\n" + RESET,
            "\n",
        ]
    )


def bonus_error_text(reason: str) -> str:
    """The text printed when the bonus game stops on an error."""
    return f"{RED}ERROR\n{reason}\n{RESET}"