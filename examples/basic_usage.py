"""Basic Chromapick usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

from chromapick import (
    ColorPicker,
    ColorRGB,
    GradientStyle,
    PickerConfig,
    Touch,
    compose,
    locate,
    search,
)


def demonstrate_surface() -> None:
    # Forward mapping: position -> color.
    surface = compose(700, 300, "horizontal", style=GradientStyle.COLORS_TO_DARK)
    print("Surface shape:", surface.shape)
    print("Color at (350, 60):", surface.pixel_at(350, 60))

    # Inverse mapping: color -> position.
    target = ColorRGB((255, 0, 0))
    print("Red is nearest at:", locate(target, 700, 300, surface=surface))

    result = search("#3080c0", 700, 300, surface=surface)
    print(f"#3080c0 -> {tuple(result.point)} ({result.color}, distance {result.distance:.2f})")


def demonstrate_picker() -> None:
    config = PickerConfig(style="light_to_colors_to_dark", axis="vertical")
    picker = ColorPicker(240, 480, config)

    for update in picker.iter_updates([Touch(120, 100), Touch(-1, 5), "#00ffff"]):
        print("Picked", update.color.to_hex(), "at", tuple(update.point))

    picker.frame.image.save("picker.png")
    print("Saved picker.png")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    demonstrate_surface()
    demonstrate_picker()
