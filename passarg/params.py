"""Click parameter type for password arguments."""

import click

from passarg.exceptions import PassArgError
from passarg.parser import parse
from passarg.types import Source


class PassArgParamType(click.ParamType):
    """
    Validates a password argument at option-parse time.

    The converted value is a source descriptor, not the secret; resolve it
    with a PassArgResolver so the order of reads stays explicit.

    Usage:
        @click.option("--pass-in", type=PASSARG, default="env:MY_PASS_IN")
    """

    name = "passarg"

    def convert(self, value, param, ctx) -> Source:
        if not isinstance(value, str):
            return value
        try:
            return parse(value)
        except PassArgError as e:
            self.fail(str(e), param, ctx)


PASSARG = PassArgParamType()
