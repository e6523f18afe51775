"""Generate sample inputs covering wide, tall, exact 16:9 and transparent images."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageDraw

OUTPUT_DIR = Path(__file__).parent / "images"


def draw_red_cornered(path: Path) -> None:
    image = Image.new("RGB", (400, 300), (255, 0, 0))
    draw = ImageDraw.Draw(image)
    draw.ellipse((100, 50, 300, 250), fill=(250, 220, 40), outline=(0, 0, 0), width=4)
    image.save(path, format="PNG")


def draw_banner(path: Path) -> None:
    image = Image.new("RGB", (2400, 400), (30, 60, 120))
    draw = ImageDraw.Draw(image)
    for index in range(12):
        x = index * 200
        draw.rectangle((x + 20, 100, x + 180, 300), fill=(240, 240, 240))
    image.save(path, format="JPEG", quality=95)


def draw_portrait(path: Path) -> None:
    image = Image.new("RGB", (600, 1200), (245, 245, 235))
    draw = ImageDraw.Draw(image)
    draw.rectangle((50, 50, 550, 1150), outline=(90, 90, 90), width=8)
    draw.text((120, 580), "portrait", fill=(20, 20, 20))
    image.save(path, format="PNG")


def draw_widescreen(path: Path) -> None:
    image = Image.new("RGB", (1920, 1080), (0, 0, 0))
    draw = ImageDraw.Draw(image)
    draw.rectangle((160, 90, 1760, 990), fill=(0, 140, 90))
    image.save(path, format="JPEG", quality=95)


def draw_transparent_logo(path: Path) -> None:
    image = Image.new("RGBA", (512, 512), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    draw.ellipse((56, 56, 456, 456), fill=(200, 30, 90, 255))
    image.save(path, format="PNG")


def main() -> None:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    draw_red_cornered(OUTPUT_DIR / "red-corner.png")
    draw_banner(OUTPUT_DIR / "banner.jpg")
    draw_portrait(OUTPUT_DIR / "portrait.png")
    draw_widescreen(OUTPUT_DIR / "widescreen.jpg")
    draw_transparent_logo(OUTPUT_DIR / "logo.png")
    print(f"Sample images written to {OUTPUT_DIR}")


if __name__ == "__main__":
    main()
