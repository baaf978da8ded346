# -*- coding: utf-8 -*-.

"""
pygfeeds.row
~~~~~~~~~~~~

This module represents a row of the list feed of a worksheet.

"""

import logging

from pygfeeds.exceptions import RequestError
from pygfeeds.utils import (completable, element_to_dict, node_text, parse_links, xml_safe_column_name,
                            to_feed_xml, ATTRIBUTES_KEY, TEXT_KEY, GSX_NS)

logger = logging.getLogger(__name__)


class Row(object):
    """
    A row of a worksheet, mapping column names to values.

    Column names are the headers of the worksheet as the feed names them (lower case, without whitespace). Values
    are strings, or None for empty cells. They can be read and changed as items or attributes; changes are sent
    with :meth:`save`.

    >>> row['name'] = 'Jane'
    >>> row.age = '31'
    >>> row.save()

    :param spreadsheet: The spreadsheet this row belongs to.
    :param data:        The entry parsed into a tree, see :func:`pygfeeds.utils.element_to_dict`.
    :param entry:       The entry element itself, its extended elements are updated on save.
    """

    def __init__(self, spreadsheet, data, entry):
        self._spreadsheet = spreadsheet
        self._load(data, entry)

    @classmethod
    def from_element(cls, spreadsheet, entry):
        return cls(spreadsheet, element_to_dict(entry), entry)

    def _load(self, data, entry):
        self._entry = entry
        self._values = {}
        self._fields = {}
        self._links = {}
        self._id = None
        for key, nodes in data.items():
            if key == ATTRIBUTES_KEY or key == TEXT_KEY:
                continue
            if key.startswith('gsx:'):
                # 'gsx:' alone has no column name left after the prefix
                self._values[key[4:] or key[:3]] = node_text(nodes[0])
            elif key == 'id':
                self._id = node_text(nodes[0])
            elif key == 'link':
                self._links = parse_links(nodes)
            elif isinstance(nodes[0], dict) and TEXT_KEY in nodes[0]:
                self._fields[key] = nodes[0][TEXT_KEY]

    def __repr__(self):
        return '<%s %s %r>' % (self.__class__.__name__, self._id, self._values)

    @property
    def id(self):
        """Id url of the row."""
        return self._id

    @property
    def title(self):
        """Title of the entry, the value of the first column."""
        return self._fields.get('title')

    @property
    def content(self):
        """Summary of the other columns as the feed renders it."""
        return self._fields.get('content')

    @property
    def links(self):
        """Link relations of the row, e.g. 'edit' and 'self'."""
        return dict(self._links)

    @property
    def raw_xml(self):
        """The entry xml of this row, including local changes applied by the last save."""
        return to_feed_xml(self._entry)

    # mapping of column values

    def __getitem__(self, column):
        return self._values[column]

    def __setitem__(self, column, value):
        self._values[column] = value

    def __contains__(self, column):
        return column in self._values

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def keys(self):
        return self._values.keys()

    def items(self):
        return self._values.items()

    def to_dict(self):
        """Column values as a new dict."""
        return dict(self._values)

    def __getattr__(self, name):
        values = self.__dict__.get('_values', {})
        if not name.startswith('_') and name in values:
            return values[name]
        raise AttributeError('%s has no column or attribute %r' % (self.__class__.__name__, name))

    def __setattr__(self, name, value):
        if not name.startswith('_') and name in self.__dict__.get('_values', {}):
            self._values[name] = value
        else:
            super(Row, self).__setattr__(name, value)

    # remote operations

    def _edit_link(self):
        try:
            return self._links['edit']
        except KeyError:
            raise RequestError('Row has no edit link. Rows are editable when fetched with the full projection.')

    @completable
    def save(self):
        """Send the current column values to the feed.

        Only the extended elements of the retained entry are touched, everything else goes back as the feed sent it.
        """
        edit_url = self._edit_link()
        for column, value in self._values.items():
            element = self._entry.find('{%s}%s' % (GSX_NS, xml_safe_column_name(column)))
            if element is None:
                logger.warning('Column %r is not part of row %s, it is not saved', column, self._id)
                continue
            element.text = '' if value is None else str(value)

        response = self._spreadsheet.make_feed_request(edit_url, 'PUT', self.raw_xml)
        if response:
            # the edit link carries the version of the entry, take the new one
            entry = response.entries()[0]
            self._load(element_to_dict(entry), entry)
        return self

    @completable
    def delete(self):
        """Delete the row from the worksheet. The object must not be used for further requests afterwards."""
        return self._spreadsheet.make_feed_request(self._edit_link(), 'DELETE')
