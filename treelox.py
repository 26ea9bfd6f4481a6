"""A tree-walking interpreter for the Lox scripting language."""
import argparse
import logging
import math
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor

logger = logging.getLogger("treelox")
logger.addHandler(logging.NullHandler())

# Each Lox call costs about a dozen Python frames.
RECURSION_LIMIT = 25_000
THREAD_STACK_SIZE = 512 * 1024 * 1024


class Token:
    def __init__(self, type, lexeme, literal, line):
        self.type = type
        self.lexeme = lexeme
        self.literal = literal
        self.line = line

    def __str__(self):
        return f"{self.type} {self.lexeme} {self.literal}"

    def __repr__(self):
        return f"Token({self.type!r}, {self.lexeme!r}, {self.literal!r}, {self.line!r})"


def is_digit(c):
    return "0" <= c <= "9"


def is_alpha(c):
    return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"


def is_alphanumeric(c):
    return is_alpha(c) or is_digit(c)


class Scanner:
    KEYWORDS = {
        "and",
        "class",
        "else",
        "false",
        "for",
        "fun",
        "if",
        "nil",
        "or",
        "print",
        "return",
        "super",
        "this",
        "true",
        "var",
        "while",
    }

    def __init__(self, source, lox):
        self.source = source
        self.lox = lox
        self.start = 0
        self.start_line = 1
        self.current = 0
        self.line = 1
        self.tokens = []

    def scan_tokens(self):
        while not self.at_end():
            self.start = self.current
            self.start_line = self.line
            self.scan_token()
        self.tokens.append(Token("EOF", "", None, self.line))
        return self.tokens

    def scan_token(self):
        match c := self.advance():
            case "(": self.add_token("LEFT_PAREN")
            case ")": self.add_token("RIGHT_PAREN")
            case "{": self.add_token("LEFT_BRACE")
            case "}": self.add_token("RIGHT_BRACE")
            case ",": self.add_token("COMMA")
            case ".": self.add_token("DOT")
            case "-": self.add_token("MINUS")
            case "+": self.add_token("PLUS")
            case ";": self.add_token("SEMICOLON")
            case "*": self.add_token("STAR")
            case "!": self.add_token("BANG_EQUAL" if self.match("=") else "BANG")
            case "=": self.add_token("EQUAL_EQUAL" if self.match("=") else "EQUAL")
            case "<": self.add_token("LESS_EQUAL" if self.match("=") else "LESS")
            case ">": self.add_token("GREATER_EQUAL" if self.match("=") else "GREATER")
            case "/":
                if self.match("/"):
                    self.comment()
                else:
                    self.add_token("SLASH")
            case " " | "\r" | "\t": pass
            case "\n": self.line += 1
            case "\"": self.string()
            case _:
                if is_digit(c):
                    self.number()
                elif is_alpha(c):
                    self.identifier()
                else:
                    self.lox.error(self.line, "Unexpected character.")

    def comment(self):
        # The newline is left for scan_token so the line count stays right.
        while self.peek() != "\n" and not self.at_end():
            self.current += 1

    def string(self):
        while self.peek() != "\"" and not self.at_end():
            if self.peek() == "\n":
                self.line += 1
            self.current += 1

        if self.at_end():
            self.lox.error(self.line, "Unterminated string.")
            return

        self.current += 1  # Closing "
        value = self.source[self.start + 1: self.current - 1]
        self.add_token("STRING", value)

    def number(self):
        while is_digit(self.peek()):
            self.current += 1

        if self.peek() == "." and is_digit(self.peek_next()):
            self.current += 1
            while is_digit(self.peek()):
                self.current += 1

        value = float(self.source[self.start:self.current])
        self.add_token("NUMBER", value)

    def identifier(self):
        while is_alphanumeric(self.peek()):
            self.current += 1

        text = self.source[self.start:self.current]
        if text in Scanner.KEYWORDS:
            self.add_token(text.upper())
        else:
            self.add_token("IDENTIFIER")

    def add_token(self, type, literal=None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(type, lexeme, literal, self.start_line))

    def match(self, expected):
        if not self.at_end():
            if self.source[self.current] == expected:
                self.current += 1
                return True
        return False

    def advance(self):
        c = self.source[self.current]
        self.current += 1
        return c

    def peek(self):
        if self.at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self):
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def at_end(self):
        return not self.current < len(self.source)


def make_syntax_tree_node(base_class, name, *attrs):
    def __init__(self, *values):
        if len(values) != len(attrs):
            message = f"{name}.__init__() take {len(attrs)} positional arguments but {len(values)} were given"
            raise TypeError(message)

        for attr, value in zip(attrs, values):
            setattr(self, attr, value)

    def __repr__(self):
        fields = ", ".join(f"{attr}={getattr(self, attr)!r}" for attr in attrs)
        return f"{base_class.__name__}.{name}({fields})"

    visit_fn_name = f"visit_{name.lower()}_{base_class.__name__.lower()}"

    def accept(self, visitor):
        return getattr(visitor, visit_fn_name)(self)

    # No __eq__/__hash__ override: nodes hash by identity, which is what
    # the interpreter's resolution table keys on.
    subclass = type(
        name, (base_class,),
        {"__init__": __init__, "__repr__": __repr__, "accept": accept})

    setattr(base_class, name, subclass)

    def visit(self, node):
        raise NotImplementedError()

    setattr(base_class.Visitor, visit_fn_name, visit)


class Expr:
    def accept(self, visitor):
        raise NotImplementedError()

    class Visitor:
        pass


class Stmt:
    def accept(self, visitor):
        raise NotImplementedError()

    class Visitor:
        pass


# Expr subclasses
make_syntax_tree_node(Expr, "Assign", "name", "value")
make_syntax_tree_node(Expr, "Binary", "left", "operator", "right")
make_syntax_tree_node(Expr, "Call", "callee", "paren", "arguments")
make_syntax_tree_node(Expr, "Get", "object", "name")
make_syntax_tree_node(Expr, "Grouping", "expression")
make_syntax_tree_node(Expr, "Literal", "value")
make_syntax_tree_node(Expr, "Logical", "left", "operator", "right")
make_syntax_tree_node(Expr, "Set", "object", "name", "value")
make_syntax_tree_node(Expr, "Super", "keyword", "method")
make_syntax_tree_node(Expr, "This", "keyword")
make_syntax_tree_node(Expr, "Unary", "operator", "right")
make_syntax_tree_node(Expr, "Variable", "name")

# Stmt subclasses
make_syntax_tree_node(Stmt, "Block", "statements")
make_syntax_tree_node(Stmt, "Class", "name", "superclass", "methods")
make_syntax_tree_node(Stmt, "Expression", "expression")
make_syntax_tree_node(Stmt, "Function", "name", "params", "body")
make_syntax_tree_node(Stmt, "If", "condition", "then_branch", "else_branch")
make_syntax_tree_node(Stmt, "Print", "expression")
make_syntax_tree_node(Stmt, "Return", "keyword", "value")
make_syntax_tree_node(Stmt, "Var", "name", "initializer")
make_syntax_tree_node(Stmt, "While", "condition", "body")


class Parser:
    MAX_ARGUMENTS = 255

    class Error(RuntimeError):
        pass

    def __init__(self, tokens, lox):
        self.tokens = tokens
        self.lox = lox
        self.current = 0

    def parse(self):
        """Parse every declaration; entries that failed to parse are None."""
        statements = []
        while not self.at_end():
            statements.append(self.declaration())
        return statements

    def declaration(self):
        try:
            if self.match("CLASS"):
                return self.class_declaration()
            if self.match("FUN"):
                return self.function("function")
            if self.match("VAR"):
                return self.var_declaration()
            return self.statement()
        except Parser.Error:
            self.synchronize()
            return None

    def class_declaration(self):
        name = self.consume("IDENTIFIER", "Expect class name.")

        superclass = None
        if self.match("LESS"):
            superclass = Expr.Variable(self.consume(
                "IDENTIFIER", "Expect superclass name."))

        self.consume("LEFT_BRACE", "Expect '{' before class body.")

        methods = []
        while not self.check("RIGHT_BRACE") and not self.at_end():
            methods.append(self.function("method"))

        self.consume("RIGHT_BRACE", "Expect '}' after class body.")
        return Stmt.Class(name, superclass, methods)

    def function(self, kind):
        name = self.consume("IDENTIFIER", f"Expect {kind} name.")
        self.consume("LEFT_PAREN", f"Expect '(' after {kind} name.")

        params = []
        if not self.check("RIGHT_PAREN"):
            params.append(self.consume(
                "IDENTIFIER", "Expect parameter name."))
            while self.match("COMMA"):
                if len(params) >= Parser.MAX_ARGUMENTS:
                    self.error(
                        self.peek(), "Can't have more than 255 parameters.")
                params.append(self.consume(
                    "IDENTIFIER", "Expect parameter name."))

        self.consume("RIGHT_PAREN", "Expect ')' after parameters.")
        self.consume("LEFT_BRACE", f"Expect '{'{'}' before {kind} body.")
        return Stmt.Function(name, params, self.block())

    def statement(self):
        if self.match("FOR"):
            return self.for_statement()
        if self.match("IF"):
            return self.if_statement()
        if self.match("PRINT"):
            return self.print_statement()
        if self.match("LEFT_BRACE"):
            return Stmt.Block(self.block())
        if keyword := self.match("RETURN"):
            return self.return_statement(keyword)
        if self.match("WHILE"):
            return self.while_statement()
        return self.expression_statement()

    def block(self):
        statements = []
        while not self.check("RIGHT_BRACE") and not self.at_end():
            statements.append(self.declaration())
        self.consume("RIGHT_BRACE", "Expect '}' after block.")
        return statements

    def for_statement(self):
        self.consume("LEFT_PAREN", "Expect '(' after 'for'.")

        initializer = None
        if self.match("SEMICOLON"):
            pass
        elif self.match("VAR"):
            initializer = self.var_declaration()
        else:
            initializer = self.expression_statement()

        condition = None
        if not self.check("SEMICOLON"):
            condition = self.expression()
        self.consume("SEMICOLON", "Expect ';' after loop condition.")

        increment = None
        if not self.check("RIGHT_PAREN"):
            increment = self.expression()
        self.consume("RIGHT_PAREN", "Expect ')' after for clauses.")

        body = self.statement()

        if increment is not None:
            body = Stmt.Block([body, Stmt.Expression(increment)])
        if condition is None:
            condition = Expr.Literal(True)
        body = Stmt.While(condition, body)
        if initializer is not None:
            body = Stmt.Block([initializer, body])
        return body

    def if_statement(self):
        self.consume("LEFT_PAREN", "Expect '(' after 'if'.")
        condition = self.expression()
        self.consume("RIGHT_PAREN", "Expect ')' after if condition.")
        then_branch = self.statement()
        else_branch = None
        if self.match("ELSE"):
            else_branch = self.statement()
        return Stmt.If(condition, then_branch, else_branch)

    def expression_statement(self):
        expression = self.expression()
        self.consume("SEMICOLON", "Expect ';' after expression.")
        return Stmt.Expression(expression)

    def print_statement(self):
        expression = self.expression()
        self.consume("SEMICOLON", "Expect ';' after value.")
        return Stmt.Print(expression)

    def return_statement(self, keyword):
        value = None
        if not self.check("SEMICOLON"):
            value = self.expression()
        self.consume("SEMICOLON", "Expect ';' after return value.")
        return Stmt.Return(keyword, value)

    def var_declaration(self):
        name = self.consume("IDENTIFIER", "Expect variable name.")
        initializer = None
        if self.match("EQUAL"):
            initializer = self.expression()
        self.consume("SEMICOLON", "Expect ';' after variable declaration.")
        return Stmt.Var(name, initializer)

    def while_statement(self):
        self.consume("LEFT_PAREN", "Expect '(' after 'while'.")
        condition = self.expression()
        self.consume("RIGHT_PAREN", "Expect ')' after condition.")
        body = self.statement()
        return Stmt.While(condition, body)

    def expression(self):
        return self.assignment()

    def assignment(self):
        expr = self.logic_or()
        if equals := self.match("EQUAL"):
            value = self.assignment()
            if isinstance(expr, Expr.Variable):
                return Expr.Assign(expr.name, value)
            elif isinstance(expr, Expr.Get):
                return Expr.Set(expr.object, expr.name, value)
            # Reported without raising; the parser is not confused.
            self.error(equals, "Invalid assignment target.")
        return expr

    def logic_or(self):
        expr = self.logic_and()
        while operator := self.match("OR"):
            expr = Expr.Logical(expr, operator, self.logic_and())
        return expr

    def logic_and(self):
        expr = self.equality()
        while operator := self.match("AND"):
            expr = Expr.Logical(expr, operator, self.equality())
        return expr

    def equality(self):
        expr = self.comparison()
        while operator := self.match("BANG_EQUAL", "EQUAL_EQUAL"):
            expr = Expr.Binary(expr, operator, self.comparison())
        return expr

    def comparison(self):
        expr = self.term()
        while operator := self.match("GREATER", "GREATER_EQUAL", "LESS", "LESS_EQUAL"):
            expr = Expr.Binary(expr, operator, self.term())
        return expr

    def term(self):
        expr = self.factor()
        while operator := self.match("MINUS", "PLUS"):
            expr = Expr.Binary(expr, operator, self.factor())
        return expr

    def factor(self):
        expr = self.unary()
        while operator := self.match("SLASH", "STAR"):
            expr = Expr.Binary(expr, operator, self.unary())
        return expr

    def unary(self):
        if operator := self.match("BANG", "MINUS"):
            return Expr.Unary(operator, self.unary())
        return self.call()

    def call(self):
        expr = self.primary()
        while True:
            if self.match("LEFT_PAREN"):
                expr = self.finish_call(expr)
            elif self.match("DOT"):
                name = self.consume(
                    "IDENTIFIER", "Expect property name after '.'.")
                expr = Expr.Get(expr, name)
            else:
                break
        return expr

    def finish_call(self, callee):
        arguments = []
        if not self.check("RIGHT_PAREN"):
            arguments.append(self.expression())
            while self.match("COMMA"):
                if len(arguments) >= Parser.MAX_ARGUMENTS:
                    self.error(
                        self.peek(), "Can't have more than 255 arguments.")
                arguments.append(self.expression())
        paren = self.consume("RIGHT_PAREN", "Expect ')' after arguments.")
        return Expr.Call(callee, paren, arguments)

    def primary(self):
        if self.match("FALSE"):
            return Expr.Literal(False)
        if self.match("TRUE"):
            return Expr.Literal(True)
        if self.match("NIL"):
            return Expr.Literal(None)
        if token := self.match("NUMBER", "STRING"):
            return Expr.Literal(token.literal)
        if self.match("LEFT_PAREN"):
            expr = self.expression()
            self.consume("RIGHT_PAREN", "Expect ')' after expression.")
            return Expr.Grouping(expr)
        if keyword := self.match("SUPER"):
            self.consume("DOT", "Expect '.' after 'super'.")
            method = self.consume(
                "IDENTIFIER", "Expect superclass method name.")
            return Expr.Super(keyword, method)
        if keyword := self.match("THIS"):
            return Expr.This(keyword)
        if token := self.match("IDENTIFIER"):
            return Expr.Variable(token)
        raise self.error(self.peek(), "Expect expression.")

    def synchronize(self):
        self.advance()
        while not self.at_end():
            if self.previous().type == "SEMICOLON":
                return
            match self.peek().type:
                case "CLASS" | "FUN" | "VAR" | "FOR" | "IF" | "WHILE" | "PRINT" | "RETURN":
                    return
            self.advance()

    def consume(self, token_type, message):
        if token := self.match(token_type):
            return token
        raise self.error(self.peek(), message)

    def match(self, *token_types):
        if self.peek().type in token_types:
            return self.advance()
        return None

    def check(self, token_type):
        return self.peek().type == token_type

    def advance(self):
        token = self.peek()
        if not self.at_end():
            self.current += 1
        return token

    def at_end(self):
        return self.peek().type == "EOF"

    def peek(self):
        return self.tokens[self.current]

    def previous(self):
        return self.tokens[self.current - 1]

    def error(self, token, message):
        self.lox.token_error(token, message)
        return Parser.Error(message)


class Resolver(Expr.Visitor, Stmt.Visitor):
    """Binds every local variable use to the number of scopes between the
    use and its declaration, and reports the static semantic errors.

    The scope stack starts empty: names declared at the top level are
    globals, and the interpreter looks up anything left unresolved in
    its global environment.
    """

    def __init__(self, interpreter, lox):
        self.interpreter = interpreter
        self.lox = lox
        self.scopes = []
        self.current_function = "NONE"
        self.current_class = "NONE"

    def resolve(self, expr_or_stmt):
        expr_or_stmt.accept(self)

    def resolve_all(self, statements):
        for statement in statements:
            self.resolve(statement)

    def visit_block_stmt(self, stmt):
        self.begin_scope()
        self.resolve_all(stmt.statements)
        self.end_scope()

    def visit_class_stmt(self, stmt):
        enclosing_class = self.current_class
        self.current_class = "CLASS"

        self.declare(stmt.name)
        self.define(stmt.name)

        if stmt.superclass:
            if stmt.name.lexeme == stmt.superclass.name.lexeme:
                self.lox.token_error(stmt.superclass.name,
                                     "A class can't inherit from itself.")
            self.resolve(stmt.superclass)
            self.current_class = "SUBCLASS"
            self.begin_scope()
            self.scopes[-1]["super"] = True

        self.begin_scope()
        self.scopes[-1]["this"] = True
        for method in stmt.methods:
            kind = "METHOD"
            if method.name.lexeme == "init":
                kind = "INITIALIZER"
            self.resolve_function(method, kind)
        self.end_scope()

        if stmt.superclass:
            self.end_scope()

        self.current_class = enclosing_class

    def visit_expression_stmt(self, stmt):
        self.resolve(stmt.expression)

    def visit_function_stmt(self, stmt):
        self.declare(stmt.name)
        self.define(stmt.name)
        self.resolve_function(stmt, "FUNCTION")

    def visit_if_stmt(self, stmt):
        self.resolve(stmt.condition)
        self.resolve(stmt.then_branch)
        if stmt.else_branch:
            self.resolve(stmt.else_branch)

    def visit_print_stmt(self, stmt):
        self.resolve(stmt.expression)

    def visit_return_stmt(self, stmt):
        if self.current_function == "NONE":
            self.lox.token_error(stmt.keyword,
                                 "Can't return from top-level code.")
        if stmt.value is not None:
            if self.current_function == "INITIALIZER":
                self.lox.token_error(stmt.keyword,
                                     "Can't return a value from an initializer.")
            self.resolve(stmt.value)

    def visit_var_stmt(self, stmt):
        self.declare(stmt.name)
        if stmt.initializer is not None:
            self.resolve(stmt.initializer)
        self.define(stmt.name)

    def visit_while_stmt(self, stmt):
        self.resolve(stmt.condition)
        self.resolve(stmt.body)

    def visit_assign_expr(self, expr):
        self.resolve(expr.value)
        self.resolve_local(expr, expr.name)

    def visit_binary_expr(self, expr):
        self.resolve(expr.left)
        self.resolve(expr.right)

    def visit_call_expr(self, expr):
        self.resolve(expr.callee)
        for argument in expr.arguments:
            self.resolve(argument)

    def visit_get_expr(self, expr):
        self.resolve(expr.object)

    def visit_grouping_expr(self, expr):
        self.resolve(expr.expression)

    def visit_literal_expr(self, expr):
        pass

    def visit_logical_expr(self, expr):
        self.resolve(expr.left)
        self.resolve(expr.right)

    def visit_set_expr(self, expr):
        self.resolve(expr.object)
        self.resolve(expr.value)

    def visit_super_expr(self, expr):
        if self.current_class == "NONE":
            self.lox.token_error(expr.keyword,
                                 "Can't use 'super' outside of a class.")
        elif self.current_class != "SUBCLASS":
            self.lox.token_error(expr.keyword,
                                 "Can't use 'super' in a class with no superclass.")
        else:
            self.resolve_local(expr, expr.keyword)

    def visit_this_expr(self, expr):
        if self.current_class == "NONE":
            self.lox.token_error(expr.keyword,
                                 "Can't use 'this' outside of a class.")
            return
        self.resolve_local(expr, expr.keyword)

    def visit_unary_expr(self, expr):
        self.resolve(expr.right)

    def visit_variable_expr(self, expr):
        if self.scopes and self.scopes[-1].get(expr.name.lexeme) is False:
            self.lox.token_error(
                expr.name, "Can't read local variable in its own initializer.")
        self.resolve_local(expr, expr.name)

    def begin_scope(self):
        self.scopes.append({})

    def end_scope(self):
        self.scopes.pop()

    def declare(self, name):
        if not self.scopes:
            return
        if name.lexeme in self.scopes[-1]:
            self.lox.token_error(
                name, "Already variable with this name in this scope.")
            return
        self.scopes[-1][name.lexeme] = False

    def define(self, name):
        if self.scopes:
            self.scopes[-1][name.lexeme] = True

    def resolve_function(self, function, kind):
        enclosing = self.current_function
        self.current_function = kind
        self.begin_scope()
        for param in function.params:
            self.declare(param)
            self.define(param)
        self.resolve_all(function.body)
        self.end_scope()
        self.current_function = enclosing

    def resolve_local(self, expr, name):
        for depth, scope in enumerate(reversed(self.scopes)):
            if name.lexeme in scope:
                self.interpreter.resolve(expr, depth)
                return


class Environment:
    def __init__(self, enclosing=None, allow_redefinition=False):
        self.values = {}
        self.enclosing = enclosing
        self.allow_redefinition = allow_redefinition

    def define(self, name, value, token=None):
        if name in self.values and not self.allow_redefinition:
            raise Interpreter.Error(
                token, f"Duplicate defined variable '{name}'.")
        self.values[name] = value

    def assign(self, name, value):
        if name.lexeme in self.values:
            self.values[name.lexeme] = value
            return
        if self.enclosing:
            self.enclosing.assign(name, value)
            return
        raise Interpreter.Error(
            name, f"Undefined variable '{name.lexeme}'.")

    def get(self, name):
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        if self.enclosing:
            return self.enclosing.get(name)
        raise Interpreter.Error(
            name, f"Undefined variable '{name.lexeme}'.")

    def assign_at(self, distance, name, value):
        self.ancestor(distance).values[name] = value
        return value

    def get_at(self, distance, name):
        return self.ancestor(distance).values[name]

    def ancestor(self, distance):
        environment = self
        for _ in range(distance):
            environment = environment.enclosing
        return environment


class LoxCallable:
    def arity(self):
        raise NotImplementedError()

    def call(self, interpreter, arguments):
        raise NotImplementedError()


class NativeFunction(LoxCallable):
    def __init__(self, name, arity, function):
        self.name = name
        self._arity = arity
        self.function = function

    def arity(self):
        return self._arity

    def call(self, interpreter, arguments):
        return self.function(*arguments)

    def __str__(self):
        return "<native fn>"


class LoxFunction(LoxCallable):
    def __init__(self, declaration, closure, is_initializer):
        self.declaration = declaration
        self.closure = closure
        self.is_initializer = is_initializer

    def arity(self):
        return len(self.declaration.params)

    def bind(self, instance):
        environment = Environment(self.closure)
        environment.define("this", instance)
        return LoxFunction(self.declaration, environment, self.is_initializer)

    def call(self, interpreter, arguments):
        environment = Environment(self.closure)
        for param, argument in zip(self.declaration.params, arguments):
            environment.define(param.lexeme, argument, param)
        try:
            interpreter.execute_block(self.declaration.body, environment)
        except Interpreter.Return as returned:
            if self.is_initializer:
                return self.closure.get_at(0, "this")
            return returned.value

        if self.is_initializer:
            return self.closure.get_at(0, "this")
        return None

    def __str__(self):
        return f"<fn {self.declaration.name.lexeme}>"


class LoxClass(LoxCallable):
    def __init__(self, name, superclass, methods):
        self.name = name
        self.superclass = superclass
        self.methods = methods

    def arity(self):
        if initializer := self.find_method("init"):
            return initializer.arity()
        return 0

    def call(self, interpreter, arguments):
        instance = LoxInstance(self)
        if initializer := self.find_method("init"):
            initializer.bind(instance).call(interpreter, arguments)
        return instance

    def find_method(self, name):
        if method := self.methods.get(name, None):
            return method
        if self.superclass:
            return self.superclass.find_method(name)
        return None

    def __str__(self):
        return self.name


class LoxInstance:
    def __init__(self, klass):
        self.klass = klass
        self.fields = {}

    def get(self, name):
        if name.lexeme in self.fields:
            return self.fields[name.lexeme]
        if method := self.klass.find_method(name.lexeme):
            return method.bind(self)
        raise Interpreter.Error(
            name, f"Undefined property '{name.lexeme}'.")

    def set(self, name, value):
        self.fields[name.lexeme] = value

    def __str__(self):
        return f"{self.klass.name}(instance)"


def divide(left, right):
    # Lox numbers are IEEE doubles, so division by zero is not an error.
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


class Interpreter(Expr.Visitor, Stmt.Visitor):
    class Error(RuntimeError):
        def __init__(self, token, message):
            super().__init__(message)
            self.token = token
            self.message = message

    class Return(Exception):
        def __init__(self, value):
            super().__init__()
            self.value = value

    def __init__(self, lox, allow_global_redefinition=False):
        self.lox = lox
        self.globals = Environment(allow_redefinition=allow_global_redefinition)
        self.environment = self.globals
        self.locals = {}

        self.globals.define("clock", NativeFunction(
            "clock", 0, time.monotonic))

    def interpret(self, stmts):
        try:
            for stmt in stmts:
                self.execute(stmt)
        except Interpreter.Error as error:
            self.lox.runtime_error(error)

    def stringify(self, object):
        if object is None:
            return "nil"
        if isinstance(object, bool):
            return "true" if object else "false"
        if isinstance(object, float):
            if math.isnan(object):
                return "NaN"
            if math.isinf(object):
                return "Infinity" if object > 0 else "-Infinity"
            text = repr(object)
            if text[-2:] == ".0":
                text = text[:-2]
            return text
        return str(object)

    def evaluate(self, expr):
        return expr.accept(self)

    def execute(self, stmt):
        return stmt.accept(self)

    def resolve(self, expr, depth):
        self.locals[expr] = depth

    def execute_block(self, statements, environment):
        previous = self.environment
        try:
            self.environment = environment
            for statement in statements:
                self.execute(statement)
        finally:
            self.environment = previous

    def visit_block_stmt(self, stmt):
        self.execute_block(stmt.statements, Environment(self.environment))

    def visit_class_stmt(self, stmt):
        superclass = None
        if stmt.superclass:
            superclass = self.evaluate(stmt.superclass)
            if not isinstance(superclass, LoxClass):
                raise Interpreter.Error(
                    stmt.superclass.name, "Superclass must be a class.")

        self.environment.define(stmt.name.lexeme, None, stmt.name)

        if superclass:
            self.environment = Environment(self.environment)
            self.environment.define("super", superclass)

        methods = {
            method.name.lexeme: LoxFunction(
                method, self.environment, method.name.lexeme == "init")
            for method in stmt.methods}

        klass = LoxClass(stmt.name.lexeme, superclass, methods)

        if superclass:
            self.environment = self.environment.enclosing

        self.environment.assign(stmt.name, klass)

    def visit_expression_stmt(self, stmt):
        self.evaluate(stmt.expression)

    def visit_function_stmt(self, stmt):
        func = LoxFunction(stmt, self.environment, False)
        self.environment.define(stmt.name.lexeme, func, stmt.name)

    def visit_if_stmt(self, stmt):
        if self.is_truthy(self.evaluate(stmt.condition)):
            self.execute(stmt.then_branch)
        elif stmt.else_branch:
            self.execute(stmt.else_branch)

    def visit_print_stmt(self, stmt):
        value = self.evaluate(stmt.expression)
        print(self.stringify(value))

    def visit_return_stmt(self, stmt):
        value = None
        if stmt.value is not None:
            value = self.evaluate(stmt.value)
        raise Interpreter.Return(value)

    def visit_var_stmt(self, stmt):
        value = None
        if stmt.initializer is not None:
            value = self.evaluate(stmt.initializer)
        self.environment.define(stmt.name.lexeme, value, stmt.name)

    def visit_while_stmt(self, stmt):
        while self.is_truthy(self.evaluate(stmt.condition)):
            self.execute(stmt.body)

    def visit_assign_expr(self, expr):
        value = self.evaluate(expr.value)
        distance = self.locals.get(expr)
        if distance is not None:
            self.environment.assign_at(distance, expr.name.lexeme, value)
        else:
            self.globals.assign(expr.name, value)
        return value

    def visit_binary_expr(self, expr):
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        operator = expr.operator
        match operator.type:
            case "BANG_EQUAL": return not self.is_equal(left, right)
            case "EQUAL_EQUAL": return self.is_equal(left, right)
            case "GREATER":
                self.check_operands(operator, float, left, right)
                return left > right
            case "GREATER_EQUAL":
                self.check_operands(operator, float, left, right)
                return left >= right
            case "LESS":
                self.check_operands(operator, float, left, right)
                return left < right
            case "LESS_EQUAL":
                self.check_operands(operator, float, left, right)
                return left <= right
            case "MINUS":
                self.check_operands(operator, float, left, right)
                return left - right
            case "PLUS":
                if isinstance(left, float) and isinstance(right, float):
                    return left + right
                if isinstance(left, str) and isinstance(right, str):
                    return left + right
                raise Interpreter.Error(
                    operator, "Operands must be two numbers or two strings.")
            case "SLASH":
                self.check_operands(operator, float, left, right)
                return divide(left, right)
            case "STAR":
                self.check_operands(operator, float, left, right)
                return left * right
            case _:
                return None

    def visit_call_expr(self, expr):
        callee = self.evaluate(expr.callee)
        arguments = [self.evaluate(argument) for argument in expr.arguments]
        if not isinstance(callee, LoxCallable):
            raise Interpreter.Error(
                expr.paren, "Can only call functions and classes.")
        if len(arguments) != callee.arity():
            raise Interpreter.Error(
                expr.paren, f"Expected {callee.arity()} arguments but got {len(arguments)}.")
        try:
            return callee.call(self, arguments)
        except RecursionError:
            raise Interpreter.Error(expr.paren, "Stack overflow.") from None

    def visit_get_expr(self, expr):
        obj = self.evaluate(expr.object)
        if isinstance(obj, LoxInstance):
            return obj.get(expr.name)
        raise Interpreter.Error(
            expr.name, "Only instances have properties.")

    def visit_grouping_expr(self, expr):
        return self.evaluate(expr.expression)

    def visit_literal_expr(self, expr):
        return expr.value

    def visit_logical_expr(self, expr):
        left = self.evaluate(expr.left)
        if expr.operator.type == "OR":
            if self.is_truthy(left):
                return left
        else:
            if not self.is_truthy(left):
                return left
        return self.evaluate(expr.right)

    def visit_set_expr(self, expr):
        obj = self.evaluate(expr.object)
        if not isinstance(obj, LoxInstance):
            raise Interpreter.Error(
                expr.name, "Only instances have fields.")
        value = self.evaluate(expr.value)
        obj.set(expr.name, value)
        return value

    def visit_super_expr(self, expr):
        distance = self.locals[expr]
        superclass = self.environment.get_at(distance, "super")
        # "this" always sits one scope inside "super".
        instance = self.environment.get_at(distance - 1, "this")

        method = superclass.find_method(expr.method.lexeme)

        if not method:
            raise Interpreter.Error(
                expr.method, f"Undefined property '{expr.method.lexeme}'.")

        return method.bind(instance)

    def visit_this_expr(self, expr):
        return self.lookup_variable(expr.keyword, expr)

    def visit_unary_expr(self, expr):
        right = self.evaluate(expr.right)
        match expr.operator.type:
            case "BANG": return not self.is_truthy(right)
            case "MINUS":
                self.check_operands(expr.operator, float, right)
                return -right
            case _: return None

    def visit_variable_expr(self, expr):
        return self.lookup_variable(expr.name, expr)

    def lookup_variable(self, name, expr):
        distance = self.locals.get(expr)
        if distance is not None:
            return self.environment.get_at(distance, name.lexeme)
        return self.globals.get(name)

    def is_truthy(self, object):
        if object is None:
            return False
        if isinstance(object, bool):
            return object
        return True

    def is_equal(self, left, right):
        if left is None:
            return right is None
        # bool is an int subclass in Python; keep true and 1 apart.
        if type(left) is not type(right):
            return False
        return left == right

    def check_operands(self, operator, expected, *operands):
        if any(not isinstance(operand, expected) for operand in operands):
            if len(operands) == 1:
                raise Interpreter.Error(
                    operator, "Operand must be a number.")
            raise Interpreter.Error(
                operator, "Operands must be numbers.")


class AstPrinter(Expr.Visitor, Stmt.Visitor):
    """Renders syntax trees as parenthesized prefix notation."""

    def print(self, node):
        return node.accept(self)

    def parenthesize(self, name, *parts):
        pieces = [name]
        for part in parts:
            if isinstance(part, (Expr, Stmt)):
                pieces.append(part.accept(self))
            else:
                pieces.append(str(part))
        return f"({' '.join(pieces)})"

    def visit_assign_expr(self, expr):
        return self.parenthesize("=", expr.name.lexeme, expr.value)

    def visit_binary_expr(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_call_expr(self, expr):
        return self.parenthesize("call", expr.callee, *expr.arguments)

    def visit_get_expr(self, expr):
        return self.parenthesize(".", expr.object, expr.name.lexeme)

    def visit_grouping_expr(self, expr):
        return self.parenthesize("group", expr.expression)

    def visit_literal_expr(self, expr):
        if expr.value is None:
            return "nil"
        if isinstance(expr.value, bool):
            return "true" if expr.value else "false"
        return str(expr.value)

    def visit_logical_expr(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_set_expr(self, expr):
        target = self.parenthesize(".", expr.object, expr.name.lexeme)
        return self.parenthesize("=", target, expr.value)

    def visit_super_expr(self, expr):
        return self.parenthesize("super", expr.method.lexeme)

    def visit_this_expr(self, expr):
        return "this"

    def visit_unary_expr(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def visit_variable_expr(self, expr):
        return expr.name.lexeme

    def visit_block_stmt(self, stmt):
        return self.parenthesize("block", *stmt.statements)

    def visit_class_stmt(self, stmt):
        parts = [stmt.name.lexeme]
        if stmt.superclass:
            parts += ["<", stmt.superclass]
        return self.parenthesize("class", *parts, *stmt.methods)

    def visit_expression_stmt(self, stmt):
        return self.parenthesize(";", stmt.expression)

    def visit_function_stmt(self, stmt):
        params = f"({' '.join(param.lexeme for param in stmt.params)})"
        return self.parenthesize("fun", stmt.name.lexeme, params, *stmt.body)

    def visit_if_stmt(self, stmt):
        if stmt.else_branch:
            return self.parenthesize("if", stmt.condition, stmt.then_branch, stmt.else_branch)
        return self.parenthesize("if", stmt.condition, stmt.then_branch)

    def visit_print_stmt(self, stmt):
        return self.parenthesize("print", stmt.expression)

    def visit_return_stmt(self, stmt):
        if stmt.value is None:
            return "(return)"
        return self.parenthesize("return", stmt.value)

    def visit_var_stmt(self, stmt):
        if stmt.initializer is None:
            return self.parenthesize("var", stmt.name.lexeme)
        return self.parenthesize("var", stmt.name.lexeme, stmt.initializer)

    def visit_while_stmt(self, stmt):
        return self.parenthesize("while", stmt.condition, stmt.body)


class Lox:
    """Drives source text through every stage and tracks reported errors."""

    def __init__(self, interactive=False, print_ast=False):
        if sys.getrecursionlimit() < RECURSION_LIMIT:
            sys.setrecursionlimit(RECURSION_LIMIT)
        self.interpreter = Interpreter(
            self, allow_global_redefinition=interactive)
        self.print_ast = print_ast
        self.had_error = False
        self.had_runtime_error = False

    def run_file(self, filename):
        try:
            with open(filename, "r", encoding="utf-8") as file:
                source = file.read()
        except OSError as error:
            print(f"Could not read {filename}: {error.strerror}.", file=sys.stderr)
            return 66
        except UnicodeDecodeError:
            print(f"Could not read {filename}: not valid UTF-8.", file=sys.stderr)
            return 66

        self.run(source)

        if self.had_error:
            return 65
        if self.had_runtime_error:
            return 70
        return 0

    def run_prompt(self):
        while True:
            try:
                line = input("> ")
            except EOFError:
                print()
                break
            self.had_error = False
            self.had_runtime_error = False
            if line.strip():
                self.run(line)
        return 0

    def run(self, source):
        statements = self.parse(source)
        if statements is None:
            return

        if self.print_ast:
            printer = AstPrinter()
            for statement in statements:
                print(printer.print(statement))
            return

        resolved = len(self.interpreter.locals)
        resolver = Resolver(self.interpreter, self)
        resolver.resolve_all(statements)
        logger.debug("resolved %d local references",
                     len(self.interpreter.locals) - resolved)

        if self.had_error:
            logger.debug("static errors reported, skipping evaluation")
            return

        self.interpreter.interpret(statements)

    def parse(self, source):
        tokens = Scanner(source, self).scan_tokens()
        logger.debug("scanned %d tokens", len(tokens))

        statements = Parser(tokens, self).parse()
        logger.debug("parsed %d statements", len(statements))

        if self.had_error:
            logger.debug("static errors reported, skipping evaluation")
            return None
        return statements

    def error(self, line, message):
        self.report(line, "", message)

    def token_error(self, token, message):
        if token.type == "EOF":
            self.report(token.line, " at end", message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def runtime_error(self, error):
        print(f"{error.message}\n[line {error.token.line}]", file=sys.stderr)
        self.had_runtime_error = True

    def report(self, line, where, message):
        print(f"[line {line}] Error{where}: {message}", file=sys.stderr)
        self.had_error = True


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="treelox", description="Run Lox scripts")
    parser.add_argument("script", nargs="*",
                        help="script to run; starts a prompt when omitted")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log each interpreter stage to stderr")
    parser.add_argument("--print-ast", action="store_true",
                        help="print the parsed syntax tree instead of running it")
    args = parser.parse_args(argv)

    if len(args.script) > 1:
        print(parser.format_usage(), end="")
        return 64

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(name)s: %(message)s")

    if args.script:
        lox = Lox(print_ast=args.print_ast)
        return call_with_large_stack(lox.run_file, args.script[0])
    lox = Lox(interactive=True, print_ast=args.print_ast)
    return call_with_large_stack(lox.run_prompt)


def call_with_large_stack(function, *args):
    """Run function on a worker thread whose C stack fits RECURSION_LIMIT frames."""
    previous = threading.stack_size(THREAD_STACK_SIZE)
    try:
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(function, *args)
    finally:
        threading.stack_size(previous)
    try:
        return future.result()
    finally:
        executor.shutdown()


if __name__ == "__main__":
    sys.exit(main())
