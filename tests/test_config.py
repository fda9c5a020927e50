from tictactoe.config import AppConfig
from tictactoe.constants import TILE_COLOR, UPDATE_RATE, WINDOW_HEIGHT, WINDOW_WIDTH
from tictactoe.systems.render import pulse_color


def test_config_defaults_without_environment():
    config = AppConfig.from_env({})
    assert config.window_width == WINDOW_WIDTH
    assert config.window_height == WINDOW_HEIGHT
    assert config.update_rate == UPDATE_RATE
    assert config.log_level == "INFO"


def test_config_reads_environment():
    config = AppConfig.from_env(
        {
            "TICTACTOE_WINDOW_WIDTH": "1024",
            "TICTACTOE_WINDOW_HEIGHT": " 768 ",
            "TICTACTOE_LOG_LEVEL": "debug",
            "TICTACTOE_UPDATE_RATE": "0.02",
        }
    )
    assert (config.window_width, config.window_height) == (1024, 768)
    assert config.log_level == "DEBUG"
    assert config.update_rate == 0.02


def test_config_falls_back_on_malformed_values():
    config = AppConfig.from_env(
        {
            "TICTACTOE_WINDOW_WIDTH": "wide",
            "TICTACTOE_WINDOW_HEIGHT": "-5",
            "TICTACTOE_LOG_LEVEL": "loud",
        }
    )
    assert config.window_width == WINDOW_WIDTH
    assert config.window_height == WINDOW_HEIGHT
    assert config.log_level == "INFO"


def test_pulse_color_rests_at_tile_color():
    assert pulse_color(0.0) == (*TILE_COLOR, 255)
    assert pulse_color(0.3) != pulse_color(0.0)
    assert all(0 <= channel <= 255 for channel in pulse_color(0.4))
