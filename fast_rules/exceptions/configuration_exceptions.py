class ConfigurationException(ValueError):
    """
    A rule declaration is malformed.

    These point at a programming mistake in the declared rules rather than at
    bad input, so the `Validator` lets them propagate unchanged instead of
    turning them into a 400 response.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyRuleException(ConfigurationException):
    pass


class InvalidRuleDeclarationException(ConfigurationException):
    pass


class UnknownRuleException(ConfigurationException):
    def __init__(self, message: str, *, rule: str):
        super().__init__(message)
        self.rule = rule


class InvalidRuleParameterException(ConfigurationException):
    pass
