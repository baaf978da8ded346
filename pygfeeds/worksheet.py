# -*- coding: utf-8 -*-.

"""
pygfeeds.worksheet
~~~~~~~~~~~~~~~~~~

This module represents a worksheet within a spreadsheet.

"""

from pygfeeds.utils import first, node_text


def _count(node):
    value = node_text(node)
    if value is None:
        return None
    return int(value)


class Worksheet(object):
    """A worksheet as seen when the spreadsheet info was fetched.

    :param spreadsheet: The spreadsheet this worksheet belongs to.
    :param data:        The parsed entry of the worksheets feed.
    """

    def __init__(self, spreadsheet, data):
        self.spreadsheet = spreadsheet
        entry_id = node_text(first(data, 'id')) or ''
        self._id = entry_id[entry_id.rfind('/') + 1:]
        self._title = node_text(first(data, 'title'))
        self._row_count = _count(first(data, 'gs:rowCount'))
        self._col_count = _count(first(data, 'gs:colCount'))

    def __repr__(self):
        return '<%s %s id:%s>' % (self.__class__.__name__, repr(self.title), self.id)

    @property
    def id(self):
        """Id of the worksheet, the last segment of its feed url."""
        return self._id

    @property
    def title(self):
        """Title of the worksheet."""
        return self._title

    @property
    def row_count(self):
        """Number of rows"""
        return self._row_count

    @property
    def col_count(self):
        """Number of columns"""
        return self._col_count

    def get_rows(self, **kwargs):
        """Rows of this worksheet, see :meth:`Spreadsheet.get_rows <pygfeeds.Spreadsheet.get_rows>`."""
        return self.spreadsheet.get_rows(self.id, **kwargs)

    def get_cells(self, options=None, **kwargs):
        """Cells of this worksheet, see :meth:`Spreadsheet.get_cells <pygfeeds.Spreadsheet.get_cells>`."""
        return self.spreadsheet.get_cells(self.id, options, **kwargs)

    def add_row(self, data, **kwargs):
        """Append a row, see :meth:`Spreadsheet.add_row <pygfeeds.Spreadsheet.add_row>`."""
        return self.spreadsheet.add_row(self.id, data, **kwargs)
