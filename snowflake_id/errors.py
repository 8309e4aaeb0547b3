class ParseError(ValueError):
    def __init__(self, value, reason='not a valid unsigned 64-bit decimal'):
        super().__init__(f'{value!r}: {reason}')
        self.value = value


class UnsupportedTypeError(TypeError):
    def __init__(self, value):
        self.type_name = type(value).__name__
        self.value = value
        super().__init__(f'the type `{self.type_name}`, of the value provided, `{value!r}`, '
                         f'is not supported by this operation')
