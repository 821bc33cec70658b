from .terminal_report import print_check_summary

__all__ = ["print_check_summary"]
