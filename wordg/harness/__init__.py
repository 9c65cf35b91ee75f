from .session import Mode, OracleSession, OracleState, SolverSession, SolverPhase
from .core import run_case, run_batch
from .io import write_csv, write_manifest

__all__ = ["Mode", "OracleSession", "OracleState", "SolverSession", "SolverPhase",
           "run_case", "run_batch", "write_csv", "write_manifest"]
