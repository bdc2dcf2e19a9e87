"""
DPLL SAT Solver Package

This package decides satisfiability of CNF formulas with chronological
backtracking over unit propagation, and provides DIMACS input/output,
model verification and batch cross-checking against PySAT.
"""

from .solver import DPLLSolver, SolverStats, SEARCH_MODES
from .formula import Formula, generate_random_formula
from .preprocess import PreprocessedFormula, preprocess
from .trail import Trail
from .watches import WatchIndex, literal_key
from .propagation import Propagator, ClauseStatus, classify
from .heuristic import BranchingHeuristic
from .search_stack import DecisionStack, DecisionFrame
from .dimacs import parse_dimacs, read_dimacs, read_dimacs_stream, fmt_dimacs, write_dimacs
from .format import fmt_verdict, fmt_value, fmt_model, fmt_result, fmt_solver_result
from .verifier import ModelVerifier, brute_force_satisfiable, verify_solver_model
from .errors import InvalidLiteralError, DimacsParseError, CrossCheckError, SearchStackError

__all__ = [
    # Solver
    'DPLLSolver',
    'SolverStats',
    'SEARCH_MODES',

    # Problem model
    'Formula',
    'generate_random_formula',
    'PreprocessedFormula',
    'preprocess',

    # Search components
    'Trail',
    'WatchIndex',
    'literal_key',
    'Propagator',
    'ClauseStatus',
    'classify',
    'BranchingHeuristic',
    'DecisionStack',
    'DecisionFrame',

    # DIMACS
    'parse_dimacs',
    'read_dimacs',
    'read_dimacs_stream',
    'fmt_dimacs',
    'write_dimacs',

    # Formatting
    'fmt_verdict',
    'fmt_value',
    'fmt_model',
    'fmt_result',
    'fmt_solver_result',

    # Verification
    'ModelVerifier',
    'brute_force_satisfiable',
    'verify_solver_model',

    # Errors
    'InvalidLiteralError',
    'DimacsParseError',
    'CrossCheckError',
    'SearchStackError',
]
