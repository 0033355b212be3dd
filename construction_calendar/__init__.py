from .report import (
    DateInputs,
    StatusKind,
    classify,
    print_report,
    run_example,
    simple_work_window,
    summarize,
)

__all__ = [
    'DateInputs',
    'StatusKind',
    'classify',
    'print_report',
    'run_example',
    'simple_work_window',
    'summarize',
]
