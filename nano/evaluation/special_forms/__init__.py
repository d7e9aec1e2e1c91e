"""Registry of compound expression forms for the Nano evaluator.

Maps expression node classes to handler functions. The evaluator handles
literals and variables inline and consults this table for everything else.
"""

from nano.types.expr import EApp, EBin, EIf, ELam, ELet
from nano.evaluation.apply import app_form
from nano.evaluation.special_forms.binop_form import binop_form
from nano.evaluation.special_forms.if_form import if_form
from nano.evaluation.special_forms.lambda_form import lambda_form
from nano.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    EBin: binop_form,
    EIf: if_form,
    ELet: let_form,
    ELam: lambda_form,
    EApp: app_form,
}
