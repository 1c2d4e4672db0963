"""
Brick Breaker game configuration with Pydantic validation
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for temporary overrides in tests and tools
    model_config = {"validate_assignment": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=600, gt=0, description="Field height in pixels")

    # Player paddle
    PADDLE_WIDTH: float = Field(default=150.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=30.0, gt=0, description="Paddle height in pixels")
    PADDLE_MAX_SPEED: float = Field(default=7.0, gt=0, description="Paddle speed per tick")
    PADDLE_BOTTOM_MARGIN: float = Field(default=10.0, ge=0, description="Gap below the paddle")

    # Ball physics (units per tick)
    BALL_SIZE: float = Field(default=16.0, gt=0, description="Ball side length in pixels")
    BALL_SPEED_X: float = Field(default=4.0, description="Initial horizontal ball speed")
    BALL_SPEED_Y: float = Field(default=-4.0, description="Initial vertical ball speed")
    BALL_START_X: float = Field(default=10.0, ge=0, description="Initial ball left edge")
    BALL_START_Y: float = Field(default=400.0, ge=0, description="Initial ball top edge")

    # Bricks and level grid
    BRICK_WIDTH: float = Field(default=80.0, gt=0, description="Brick width / column pitch")
    BRICK_HEIGHT: float = Field(default=24.0, gt=0, description="Brick height / row pitch")
    LEVEL_TOP_OFFSET: float = Field(default=60.0, ge=0, description="Top of the first brick row")

    # Collision response
    SINGLE_BOUNCE_PER_TICK: bool = Field(
        default=False, description="Reflect at most once per tick on paddle/brick hits"
    )

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(0, 255, 0), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PAUSE_OVERLAY_ALPHA: int = Field(default=128, ge=0, le=255, description="Overlay opacity")
    PAUSE_FONT_SIZE: int = Field(default=30, gt=0, description="Pause text size")
    ASSETS_DIR: str = Field(default="assets", description="Directory holding image assets")

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for game elements"""
        if self.PADDLE_WIDTH > self.FIELD_WIDTH:
            raise ValueError(
                f"PADDLE_WIDTH ({self.PADDLE_WIDTH}) must not exceed FIELD_WIDTH "
                f"({self.FIELD_WIDTH})"
            )

        min_height = self.PADDLE_HEIGHT + self.PADDLE_BOTTOM_MARGIN
        if self.FIELD_HEIGHT < min_height:
            raise ValueError(f"FIELD_HEIGHT must be at least {min_height} pixels")

        if self.BALL_SIZE > min(self.FIELD_WIDTH, self.FIELD_HEIGHT):
            raise ValueError(f"BALL_SIZE ({self.BALL_SIZE}) does not fit in the field")

        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "brick_breaker_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "brick_breaker_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)


# Global configuration instance with validation
game_config = GameConfig()


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
