class Unauthenticated(Exception):
    """El llamador no trae un identificador de usuario resoluble."""

    message = "User not authenticated"


class ServerError(Exception):
    """Fallo al consultar o agregar los datos; lleva el mensaje original."""

    def __init__(self, error: str):
        super().__init__(error)
        self.error = error
