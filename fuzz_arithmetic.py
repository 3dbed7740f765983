"""Compares treecalc against Python's own arithmetic on random expressions, run from project root"""
import math
import random
import re
import string
import warnings

from treecalc.parser import parse
from treecalc.runtime import evaluate
from treecalc.utils import SourceError

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return float(eval(code))
    except ZeroDivisionError:
        return "division by zero"
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return evaluate(parse(code))
    except SourceError as e:
        return str(e)


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/ "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        if re.findall(r"(^|\D)\.|\.(\D|$)", code):
            continue  # python accepts "1." and ".5"

        if re.findall(r"(^|[(+\-*/])\s*\+", code):
            continue  # python accepts unary plus

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, float) and isinstance(res_my, float) and math.isclose(res_my, res_py):
            continue
        if res_py == "division by zero" and isinstance(res_my, float) and (math.isinf(res_my) or math.isnan(res_my)):
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith(("invalid syntax", "unmatched")) and isinstance(res_my, float):
            continue  # treecalc leaves tokens after a complete expression unread
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
