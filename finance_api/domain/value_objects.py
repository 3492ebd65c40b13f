"""
===============================================================================
TARJETA CRC — domain/value_objects.py
===============================================================================

Módulo:
    Objetos de valor / reglas puras del dominio

Responsabilidades:
    - CPF: validación del dígito verificador (dos pasadas, pesos 10..2 y 11..2).
    - Currency: punto fijo con 4 decimales (entero escalado x10^4).
    - Password policy: reglas mínimas de contraseña (mensajes para el cliente).

Colaboradores:
    - application/schemas.py: validators pydantic que usan estas reglas.
    - application/usecases/transaction/mapper.py: format_currency para salida.

Principios:
    - Funciones puras, sin IO.
===============================================================================
"""

from __future__ import annotations

import re
import unicodedata
from decimal import ROUND_HALF_UP, Decimal

# ---------------------------------------------------------------------------
# CPF
# ---------------------------------------------------------------------------

_NON_DIGITS = re.compile(r"\D")


def is_valid_cpf(value: str) -> bool:
    """
    Valida un CPF (con o sin máscara).

    Reglas:
      - 11 dígitos luego de quitar no-dígitos.
      - Rechaza secuencias repetidas (00000000000 ... 99999999999).
      - Ambos dígitos verificadores deben coincidir.
    """
    digits = _NON_DIGITS.sub("", str(value or ""))
    if len(digits) != 11:
        return False
    if digits == digits[0] * 11:
        return False

    numbers = [int(d) for d in digits]
    for check_index in (9, 10):
        total = sum(
            numbers[i] * (check_index + 1 - i) for i in range(check_index)
        )
        rest = (total * 10) % 11
        if rest == 10:
            rest = 0
        if rest != numbers[check_index]:
            return False
    return True


# ---------------------------------------------------------------------------
# Currency (punto fijo)
# ---------------------------------------------------------------------------

DECIMAL_PLACES = 4
SCALE = 10**DECIMAL_PLACES

_CURRENCY_RE = re.compile(rf"^\d+(\.\d{{1,{DECIMAL_PLACES}}})?$")

CURRENCY_PRECISION_MESSAGE = (
    f"Valor deve ter no máximo {DECIMAL_PLACES} casas decimais"
)
CURRENCY_POSITIVE_MESSAGE = "Valor deve ser maior que zero"
CURRENCY_MAX_MESSAGE = "Valor excede o máximo permitido"

# Límite de la columna BIGINT que guarda el valor escalado.
MAX_SCALED_AMOUNT = 2**63 - 1


def _as_decimal(value: int | float | Decimal) -> Decimal:
    # str() evita arrastrar el error binario del float (0.1 -> 0.1000000000000000055...).
    return Decimal(str(value))


def has_valid_precision(value: int | float | Decimal) -> bool:
    """True si el número se escribe con a lo sumo 4 decimales y sin signo."""
    # Notación posicional: str(1e16) daría "1e+16".
    text = format(_as_decimal(value), "f")
    return bool(_CURRENCY_RE.match(text))


def to_scaled_amount(value: int | float | Decimal) -> int:
    """Número decimal -> entero escalado x10^4."""
    scaled = _as_decimal(value) * SCALE
    return int(scaled.to_integral_value(rounding=ROUND_HALF_UP))


def format_currency(scaled: int) -> str:
    """Entero escalado -> string con exactamente 4 decimales ("5000.0000")."""
    return f"{Decimal(scaled) / SCALE:.{DECIMAL_PLACES}f}"


# ---------------------------------------------------------------------------
# Password policy
# ---------------------------------------------------------------------------

PASSWORD_MIN_LENGTH = 8
PASSWORD_SYMBOLS = ("!", "@", "#", "$", "%", "&", "*", "+", "=", "~", "^", "-", "_")

_LETTER_RE = re.compile(r"[A-Za-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile("[" + re.escape("".join(PASSWORD_SYMBOLS)) + "]")


def remove_accents(value: str) -> str:
    normalized = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in normalized if not unicodedata.combining(ch))


def check_password_rules(password: str) -> str | None:
    """
    Devuelve el primer mensaje de regla violada, o None si la contraseña es válida.

    Orden: longitud -> letra -> mayúscula -> número -> símbolo.
    """
    if not password or len(password) < PASSWORD_MIN_LENGTH:
        return f"A senha deve ter no mínimo {PASSWORD_MIN_LENGTH} caracteres"

    plain = remove_accents(password)

    if not _LETTER_RE.search(plain):
        return "A senha deve possuir ao menos uma letra"
    if not _UPPER_RE.search(plain):
        return "A senha deve possuir ao menos uma letra maiúscula"
    if not _DIGIT_RE.search(plain):
        return "A senha deve possuir ao menos um número"
    if not _SYMBOL_RE.search(plain):
        return (
            "A senha deve possuir ao menos um símbolo. Ex.: "
            + ", ".join(PASSWORD_SYMBOLS)
        )
    return None
