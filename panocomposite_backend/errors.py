# errors.py
"""Erros de composição. Cada chamada aborta inteira no primeiro erro."""


class CompositeError(Exception):
    """Base de todos os erros devolvidos ao chamador."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def describe_source(label: str, index: int | None = None) -> str:
    return f"layer {index}" if index is not None else label


class DecodeError(CompositeError):
    """Bytes que o codec não reconhece como imagem."""

    def __init__(self, label: str, reason: str, index: int | None = None):
        self.label = describe_source(label, index)
        self.index = index
        super().__init__(
            f"Falha ao decodificar imagem ({self.label}): {reason}")


class TransportDecodeError(CompositeError):
    """Base64 inválido ou data URL malformada."""

    def __init__(self, label: str, reason: str, index: int | None = None):
        self.label = describe_source(label, index)
        self.index = index
        super().__init__(
            f"Falha ao decodificar transporte ({self.label}): {reason}")


class EncodeError(CompositeError):
    def __init__(self, reason: str):
        super().__init__(f"Falha ao codificar imagem resultante: {reason}")


class InvalidLayerType(CompositeError):
    def __init__(self, label: str, value, index: int | None = None):
        self.label = describe_source(label, index)
        self.index = index
        super().__init__(
            f"Valor de {self.label} precisa ser string "
            f"(recebido: {type(value).__name__})")


class InvalidPreviewSize(CompositeError):
    def __init__(self, width, height, reason: str):
        self.width = width
        self.height = height
        super().__init__(
            f"Tamanho de preview inválido {width}x{height}: {reason}")
