# entry_tracker/outputs/csv_output.py

import os
import csv
import logging
from decimal import Decimal
from entry_tracker.outputs.base import BaseOutput
from entry_tracker.utils import record_label

logger = logging.getLogger(__name__)


class CSVOutput(BaseOutput):
    """
    Writes all entries to entries.csv in the output directory, in
    collection order.
    """
    FILENAME = 'entries.csv'

    def __init__(self, config):
        self.config     = config
        self.output_dir = config.get('output_dir', 'data')
        os.makedirs(self.output_dir, exist_ok=True)

    def write(self, entries):
        out_path = os.path.join(self.output_dir, self.FILENAME)
        with open(out_path, 'w', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(['id', 'date', 'description', 'type', 'amount'])
            for rec in entries:
                writer.writerow([
                    rec.id,
                    record_label(rec),
                    rec.description,
                    'expense' if rec.is_expense else 'income',
                    f"{Decimal(str(rec.amount)):.2f}",
                ])

        logger.info("Written %d entries to %s", len(entries), out_path)
        return out_path
