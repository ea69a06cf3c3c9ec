"""Lambda function representation and argument binding for Cinder."""

from __future__ import annotations

from io import StringIO

from cinder import SExpression, LispValue
from cinder.errors import CinderArityError
from cinder.types.environment import Environment
from cinder.types.function import Function, as_binding
from cinder.types.symbol import Symbol


class Lambda(Function):
    """A user closure with formal parameters, body forms, and captured scope."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: list[SExpression], env: Environment):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: tuple[SExpression, ...] = tuple(body)
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")")
            for form in self.body:
                buffer.write(" ")
                buffer.write(_form_to_str(form))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"#<lambda {self}>"

    def __call__(self, args: list[LispValue]) -> LispValue:
        # Evaluation lives in the application engine; import lazily to avoid a cycle.
        from cinder.evaluation.apply import apply
        from cinder.evaluation.evaluator import evaluate
        return apply(self, args, evaluate)

    def bind_arguments(self, args: list[LispValue]) -> Environment:
        """
        Return a fresh scope, child of the captured scope, binding each formal
        to the corresponding argument.

        The arity check happens before anything is bound.
        """
        if len(args) != len(self.formals):
            raise CinderArityError(
                f"Expected {len(self.formals)} argument(s), got {len(args)}"
            )
        call_env = self.env.child()
        for formal, arg in zip(self.formals, args):
            call_env.define(formal, as_binding(arg))
        return call_env


def _form_to_str(form: SExpression) -> str:
    if isinstance(form, list):
        return "(" + " ".join(_form_to_str(f) for f in form) + ")"
    return str(form)
