"""
Export Service

Flat CSV and JSON projections of a stored grocery list.
"""

import csv
import io
import json

CSV_COLUMNS = ['Item Name', 'Quantity', 'Unit', 'Category', 'Estimated Price', 'Notes', 'Optional']


def grocery_list_rows(grocery_list):
    """One tabular row per item, keyed by the CSV column headers."""
    rows = []
    for item in grocery_list.get('items', []):
        price = item.get('estimated_price')
        rows.append({
            'Item Name': item.get('display_name') or item.get('name'),
            'Quantity': item.get('quantity'),
            'Unit': item.get('unit'),
            'Category': item.get('category'),
            'Estimated Price': price if price is not None else '',
            'Notes': item.get('notes') or '',
            'Optional': 'Yes' if item.get('optional') else 'No',
        })
    return rows


def grocery_list_to_csv(grocery_list):
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=CSV_COLUMNS)
    writer.writeheader()
    writer.writerows(grocery_list_rows(grocery_list))
    return output.getvalue()


def grocery_list_to_json(grocery_list):
    return json.dumps(grocery_list, indent=2, default=str)
