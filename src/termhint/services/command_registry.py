"""
Command palette registry with fuzzy search.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from .fuzzy_matcher import FuzzyMatcher

logger = logging.getLogger(__name__)

ALIAS_WEIGHT = 0.9
DESCRIPTION_WEIGHT = 0.5
WEAK_NAME_SCORE = 10.0
CATEGORY_SCORE = 50.0


@dataclass
class Command:
    """
    A palette command.

    The handler receives the host context and may return a status message.
    """

    name: str
    description: str
    handler: Callable[[Any], Optional[str]]
    category: Optional[str] = None
    aliases: Tuple[str, ...] = field(default_factory=tuple)


@dataclass
class CommandSuggestion:
    """A command matching the palette input."""

    name: str
    description: str
    category: Optional[str]
    score: float
    match_positions: List[int]


class CommandResult(BaseModel):
    """
    Outcome of executing a command.
    """

    command: str = Field(description="Name or alias that was requested")
    success: bool = Field(description="Whether the command ran without error")
    message: Optional[str] = Field(default=None, description="Handler output")
    error: Optional[str] = Field(default=None, description="Error if it failed")


class CommandRegistry:
    """
    Registered commands, indexed by name and alias.
    """

    def __init__(self, matcher: Optional[FuzzyMatcher] = None):
        self._commands: Dict[str, Command] = {}
        self._aliases: Dict[str, str] = {}
        self._matcher = matcher or FuzzyMatcher()

    def register(self, command: Command) -> None:
        """Register a command, replacing any command with the same name."""
        if not command.name:
            raise ValueError("Command name cannot be empty")
        if command.name in self._commands:
            self.unregister(command.name)
        self._commands[command.name] = command
        for alias in command.aliases:
            self._aliases[alias] = command.name

    def unregister(self, name: str) -> bool:
        command = self._commands.pop(name, None)
        if command is None:
            return False
        for alias in command.aliases:
            if self._aliases.get(alias) == name:
                del self._aliases[alias]
        return True

    def get(self, name: str) -> Optional[Command]:
        """Look up a command by name or alias."""
        command = self._commands.get(name)
        if command is not None:
            return command
        real_name = self._aliases.get(name)
        return self._commands.get(real_name) if real_name is not None else None

    def contains(self, name: str) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self._commands)

    def is_empty(self) -> bool:
        return not self._commands

    def command_names(self) -> List[str]:
        return sorted(self._commands)

    def clear(self) -> None:
        self._commands.clear()
        self._aliases.clear()

    def search(self, query: str) -> List[CommandSuggestion]:
        """
        Fuzzy search across names, aliases and descriptions.

        Alias matches are slightly discounted. Descriptions are only consulted
        when the name/alias score is weak, are discounted further and carry no
        highlight positions.

        Returns:
            Suggestions sorted by score (highest first), then by name. An empty
            query lists every command by name with score 0.0.
        """
        if not query:
            return [
                self._suggestion(self._commands[name], 0.0, [])
                for name in sorted(self._commands)
            ]

        suggestions = []
        for command in self._commands.values():
            best_score = 0.0
            best_positions: List[int] = []

            result = self._matcher.score(query, command.name)
            if result is not None and result[0] > best_score:
                best_score, best_positions = result

            for alias in command.aliases:
                result = self._matcher.score(query, alias)
                if result is not None and result[0] * ALIAS_WEIGHT > best_score:
                    best_score = result[0] * ALIAS_WEIGHT
                    best_positions = result[1]

            if best_score < WEAK_NAME_SCORE:
                result = self._matcher.score(query, command.description)
                if result is not None and result[0] * DESCRIPTION_WEIGHT > best_score:
                    best_score = result[0] * DESCRIPTION_WEIGHT
                    best_positions = []

            if best_score > 0.0:
                suggestions.append(self._suggestion(command, best_score, best_positions))

        suggestions.sort(key=lambda s: (-s.score, s.name))
        return suggestions

    def filter_by_category(self, category: str) -> List[CommandSuggestion]:
        return [
            self._suggestion(self._commands[name], CATEGORY_SCORE, [])
            for name in sorted(self._commands)
            if self._commands[name].category == category
        ]

    def categories(self) -> List[str]:
        return sorted(
            {c.category for c in self._commands.values() if c.category is not None}
        )

    def execute(self, name: str, ctx: Any = None) -> CommandResult:
        """
        Run a command by name or alias.

        Unknown commands and handler exceptions produce an unsuccessful result
        instead of raising. Non-string handler output is converted with str().
        """
        command = self.get(name)
        if command is None:
            return CommandResult(
                command=name, success=False, error=f"Command not found: '{name}'"
            )
        try:
            output = command.handler(ctx)
            message = None if output is None else str(output)
        except Exception as e:
            logger.warning("Command %r failed: %s", command.name, e)
            return CommandResult(command=name, success=False, error=str(e))
        logger.debug("Executed command %r", command.name)
        return CommandResult(command=name, success=True, message=message)

    @staticmethod
    def _suggestion(
        command: Command, score: float, positions: List[int]
    ) -> CommandSuggestion:
        return CommandSuggestion(
            name=command.name,
            description=command.description,
            category=command.category,
            score=score,
            match_positions=positions,
        )
