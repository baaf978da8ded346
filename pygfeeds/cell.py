# -*- coding: utf-8 -*-.

"""
pygfeeds.cell
~~~~~~~~~~~~~

This module represents a cell of the cells feed of a worksheet.

"""

from pygfeeds.exceptions import RequestError
from pygfeeds.utils import (completable, element_to_dict, first, node_text, parse_links, xml_safe_value,
                            ATTRIBUTES_KEY, TEXT_KEY, ATOM_NS, GS_NS)


class Cell(object):
    """
    A single cell of a worksheet.

    :param spreadsheet:     The spreadsheet this cell belongs to.
    :param worksheet_id:    Id of the worksheet of the cell.
    :param data:            The parsed entry of the cells feed.
    """

    def __init__(self, spreadsheet, worksheet_id, data):
        self.spreadsheet = spreadsheet
        self.worksheet_id = worksheet_id
        self._load(data)

    def _load(self, data):
        cell = first(data, 'gs:cell') or {}
        attributes = cell.get(ATTRIBUTES_KEY, {})
        self.id = node_text(first(data, 'id'))
        self.row = int(attributes['row'])
        self.col = int(attributes['col'])
        self.value = cell.get(TEXT_KEY, '')
        self.input_value = attributes.get('inputValue')
        self.numeric_value = attributes.get('numericValue')
        self._links = parse_links(data.get('link'))

    def __repr__(self):
        return '<%s R%sC%s %s>' % (self.__class__.__name__, self.row, self.col, repr(self.value))

    @property
    def links(self):
        """Link relations of the cell, e.g. 'edit' and 'self'."""
        return dict(self._links)

    @completable
    def set_value(self, value):
        """Set the value, or formula, of this cell and save it right away."""
        self.value = value
        return self.save()

    @completable
    def save(self):
        """Send the current value to the feed."""
        try:
            edit_url = self._links['edit']
        except KeyError:
            raise RequestError('Cell has no edit link. Cells are editable when fetched with the full projection.')

        cell_id = '%scells/%s/%s/private/full/R%sC%s' % (self.spreadsheet.feed.feed_url, self.spreadsheet.key,
                                                         self.worksheet_id, self.row, self.col)
        data_xml = ('<entry xmlns="%s" xmlns:gs="%s">'
                    '<id>%s</id>'
                    '<link rel="edit" type="application/atom+xml" href="%s"/>'
                    '<gs:cell row="%s" col="%s" inputValue="%s"/>'
                    '</entry>') % (ATOM_NS, GS_NS, cell_id, cell_id, self.row, self.col,
                                   xml_safe_value(self.value))

        response = self.spreadsheet.make_feed_request(edit_url, 'PUT', data_xml)
        if response:
            self._load(element_to_dict(response.entries()[0]))
        return self

    @completable
    def delete(self):
        """Clear the cell. The cell stays in the feed with an empty value."""
        return self.set_value('')
