from qshell.common.tabular_format import TabularFormat


class CommandResult:
    def __init__(self, terminate=False, success=True, notice=None, warning=None,
                 field_names=None, rows=None, elapsed=0):
        # True asks the session loop to end the session
        self.terminate = terminate
        self.success = success
        self.notice = notice
        self.warning = warning
        self.field_names = field_names
        self.rows = rows
        self.elapsed = elapsed

    def is_exit(self):
        return self.terminate

    def add_row(self, row):
        if self.rows is None:
            self.rows = []
        self.rows.append(row)

    def __repr__(self):
        lines = []
        if self.notice:
            lines.append(f'NOTICE: {self.notice}')
        if self.warning:
            lines.append(f'WARNING: {self.warning}')
        if self.field_names:
            table = TabularFormat(self.field_names)
            for row in self.rows or ():
                table.add_row(row)
            lines.append(table.get_string())
        lines.append(f'Elapsed Time: {self.elapsed:.3f}s')
        return '\n'.join(lines)
