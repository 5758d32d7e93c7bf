class TabularFormat:
    def __init__(self, field_names=None):
        self.field_names = list(field_names or [])
        self.rows = []

    def add_row(self, row):
        if self.field_names and len(row) != len(self.field_names):
            raise ValueError(f'Row has {len(row)} values but the table '
                             f'has {len(self.field_names)} columns.')
        self.rows.append(tuple(row))

    @staticmethod
    def _cell_lines(value):
        if value is None:
            return ['NULL']
        return str(value).split('\n')

    def _column_widths(self):
        widths = [len(str(name)) for name in self.field_names]
        for row in self.rows:
            for i, value in enumerate(row):
                longest = max(len(line) for line in self._cell_lines(value))
                widths[i] = max(widths[i], longest)
        return widths

    @staticmethod
    def _separator(widths):
        return '+' + '+'.join('-' * (w + 2) for w in widths) + '+'

    def _render_row(self, row, widths, header=False):
        cells = [self._cell_lines(value) for value in row]
        height = max(len(lines) for lines in cells)

        out = []
        for line_no in range(height):
            parts = []
            for col, lines in enumerate(cells):
                text = lines[line_no] if line_no < len(lines) else ''
                width = widths[col]
                if header:
                    parts.append(f' {text:^{width}} ')
                elif isinstance(row[col], (int, float)) and not isinstance(row[col], bool):
                    # numbers line up on the right
                    parts.append(f' {text:>{width}} ')
                else:
                    parts.append(f' {text:<{width}} ')
            out.append('|' + '|'.join(parts) + '|')
        return out

    def get_string(self):
        if not self.field_names or not self.rows:
            return '(empty)'

        widths = self._column_widths()
        separator = self._separator(widths)
        lines = [separator]
        lines.extend(self._render_row(self.field_names, widths, header=True))
        lines.append(separator)
        for row in self.rows:
            lines.extend(self._render_row(row, widths))
        lines.append(separator)
        return '\n'.join(lines)

    def __str__(self):
        return self.get_string()
