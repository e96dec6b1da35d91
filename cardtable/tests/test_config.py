"""
Tests for configuration, logging setup and the game registry.
"""

import logging

import pytest
from pydantic import ValidationError

from ..config import EngineConfig, LogLevel, configure_logging
from ..engine_core.errors import StructuralViolation
from ..engine_core.players import PlayerCircle
from ..games import GAMES, create_game
from ..games.crazy_eights import CrazyEights, DrawCard
from ..games.pinochle import Pinochle


class TestEngineConfig:
    """Tests for EngineConfig."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.seed is None
        assert config.log_level == LogLevel.WARNING

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CARDTABLE_SEED", "99")
        monkeypatch.setenv("CARDTABLE_LOG_LEVEL", "debug")

        config = EngineConfig.from_env()

        assert config.seed == 99
        assert config.log_level == LogLevel.DEBUG

    def test_from_env_unset(self, monkeypatch):
        monkeypatch.delenv("CARDTABLE_SEED", raising=False)
        monkeypatch.delenv("CARDTABLE_LOG_LEVEL", raising=False)
        assert EngineConfig.from_env() == EngineConfig()

    def test_bad_log_level(self):
        with pytest.raises(ValidationError):
            EngineConfig(log_level="LOUD")

    def test_seeded_rng_repeats(self):
        config = EngineConfig(seed=5)
        assert config.make_rng().random() == config.make_rng().random()


class TestLogging:
    """Tests for logging setup and engine log records."""

    def test_configure_is_idempotent(self):
        logger = configure_logging(EngineConfig(log_level="INFO"))
        handlers = list(logger.handlers)
        configure_logging(EngineConfig(log_level="DEBUG"))

        assert logger.name == "cardtable"
        assert logger.handlers == handlers
        assert logger.level == logging.DEBUG

    def test_rejection_logged(self, two_players, bob, caplog):
        game = CrazyEights(two_players)
        with caplog.at_level(logging.INFO, logger="cardtable"):
            game.submit(DrawCard(bob))

        assert any("OUT_OF_TURN" in record.getMessage() for record in caplog.records)


class TestRegistry:
    """Tests for create_game()."""

    def test_known_games(self):
        assert set(GAMES) == {"crazy_eights", "golf", "quinns_game", "pinochle"}

    def test_create_seeded(self, two_players, alice):
        first = create_game("crazy_eights", two_players, EngineConfig(seed=11))
        second = create_game("crazy_eights", two_players, EngineConfig(seed=11))

        assert isinstance(first, CrazyEights)
        assert [c.card_id for c in first.hands[alice]] == [c.card_id for c in second.hands[alice]]

    def test_create_pinochle(self, four_players):
        assert isinstance(create_game("pinochle", four_players), Pinochle)

    def test_unknown_game(self, two_players):
        with pytest.raises(ValueError):
            create_game("bridge", two_players)

    def test_seat_count_still_checked(self, alice):
        with pytest.raises(StructuralViolation):
            create_game("golf", PlayerCircle([alice]))
