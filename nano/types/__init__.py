from nano.types.nil import Nil, NilType
from nano.types.expr import (
    Binop, Expr, EInt, EBool, EVar, EBin, EIf, ELet, ELam, EApp, ENil,
)
from nano.types.environment import Environment, lookup, extend
from nano.types.value import Pair, Primitive, VErr, show, to_list, from_list
from nano.types.closure import Closure
