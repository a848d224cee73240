from pocketledger.application.ports.reporting import ReportingReadPort

__all__ = ["ReportingReadPort"]
