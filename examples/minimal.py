"""
Ejemplo Mínimo de chars_counter
===============================

PROPÓSITO:
    Mostrar los tres niveles de conteo sobre un mismo texto: texto completo,
    ventana [start, end] y ventana con límite de coincidencias.

QUÉ DEMUESTRA:
    1. count_all: cuenta cada posición igual a algún carácter objetivo
    2. count_in_range: misma cuenta restringida a una ventana inclusiva
    3. count_in_range_limited: se detiene cuando el total llega al límite
    4. CharText.windows: recorrer el texto por ventanas consecutivas

VARIABLES DE ENTORNO (opcionales):
    CHARS_TEXT        Texto a analizar (default: frase de ejemplo)
    CHARS_TARGETS     Caracteres a buscar (default: "aeiou")
    CHARS_LIMIT       Límite para el conteo limitado (default: 5)
    CHARS_LOG_LEVEL   Nivel de logging (default: INFO)

CÓMO EJECUTAR:
    uv run python examples/minimal.py

    # Con logging detallado (muestra el corte por límite)
    CHARS_LOG_LEVEL=DEBUG uv run python examples/minimal.py
"""

import logging
import os

from chars_counter import CharText, OutOfRangeError


def main() -> None:
    text = os.getenv("CHARS_TEXT", "the quick brown fox jumps over the lazy dog")
    targets = os.getenv("CHARS_TARGETS", "aeiou")
    limit = int(os.getenv("CHARS_LIMIT", "5"))
    log_level = os.getenv("CHARS_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))

    ctx = CharText.from_text(text)
    print("Total:", ctx.count(targets))
    try:
        last = ctx.len_chars() - 1
        print("First half:", ctx.count_range(targets, 0, last // 2))
        print(f"Limited to {limit}:", ctx.count_limited(targets, 0, last, limit))
    except OutOfRangeError as exc:
        print(f"Window rejected ({exc.param}): {exc}")

    for window in ctx.windows(10):
        print(f"[{window.start:>3}, {window.end:>3}]", ctx.count_window(targets, window))


if __name__ == "__main__":
    main()
