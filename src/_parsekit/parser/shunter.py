"""
The shunter builds an abstract syntax tree for an expression of binary infix
operators using the shunting-yard algorithm. The caller alternates between
pushing operands and operators, and calls finish() to get the root.

>>> shunter = OperatorShunter({"+": 1, "*": 2})
>>> shunter.push_operand(1)
>>> shunter.push_operator("+")
>>> shunter.push_operand(2)
>>> shunter.push_operator("*")
>>> shunter.push_operand(3)
>>> shunter.finish()
BinaryNode(operator='+', left=1, right=BinaryNode(operator='*', left=2, right=3))

Unary operators, parentheses and function calls are left to the caller,
which can parse them into a single operand.
"""

from dataclasses import dataclass
from typing import Any

from _parsekit.parser.errors import ParserError, UnexpectedTokenError
from _parsekit.tokenizer.token import Token


@dataclass(frozen=True)
class BinaryNode:
    operator: Any
    left: Any
    right: Any


def operator_symbol(operator):
    """
    :returns: The content of an operator token, or operator itself if it is
        not a token.
    """
    if isinstance(operator, Token):
        return operator.content
    return operator


class OperatorShunter:
    def __init__(self, precedences, ast_constructor=None):
        """
        :param precedences: Mapping from operator symbol to precedence,
            higher binds tighter.
        :param ast_constructor: Function (operator, left, right) -> node.
            Defaults to BinaryNode.
        """
        self.precedences = precedences
        self.ast_constructor = ast_constructor or BinaryNode
        self.operator_stack = []
        self.output = []

    def push_operand(self, value):
        self.output.append(value)

    def collapse(self):
        """
        Replace the two topmost operands with the node for the topmost
        operator applied to them. Nothing is removed if an operand is missing.
        """
        operator = self.operator_stack[-1]
        if len(self.output) < 2:
            raise ParserError(
                f"malformed expression: operator {operator_symbol(operator)} "
                "is missing an operand"
            )
        self.operator_stack.pop()
        right = self.output.pop()
        left = self.output.pop()
        self.output.append(self.ast_constructor(operator, left, right))

    def precedence(self, operator):
        return self.precedences[operator_symbol(operator)]

    def push_operator(self, operator):
        """
        :raises UnexpectedTokenError: if the operator is not in the
            precedence table.
        """
        symbol = operator_symbol(operator)
        if symbol not in self.precedences:
            token = operator if isinstance(operator, Token) else None
            raise UnexpectedTokenError(
                "operator",
                token,
                message=f"{symbol} is not a valid operator",
                found=repr(symbol),
            )
        if not self.operator_stack:
            self.operator_stack.append(operator)
            return

        # Equal precedence collapses too, making operators left associative
        if self.precedence(operator) <= self.precedence(self.operator_stack[-1]):
            self.collapse()
        self.operator_stack.append(operator)

    def finish(self):
        """
        Collapse all pending operators.

        :returns: The root of the expression.
        :raises ParserError: if the operands do not reduce to a single
            expression.
        """
        while self.operator_stack:
            self.collapse()
        if not self.output:
            raise ParserError("malformed expression: empty expression")
        if len(self.output) != 1:
            raise ParserError("malformed expression: multiple unreduced operands")
        return self.output.pop()
