import argparse
import json
import logging
import os
import sys
import time
from datetime import datetime

from analytics._lap_timing import build_sector_table

from ._assembler import assemble_race_data
from ._errors import SectorAnalysisError
from ._records import race_data_to_dict
from ._util import open_document, parse_file

logger = logging.getLogger(__name__)

INPUT_DIR = os.path.join('pdfs', 'sector analysis')
RAW_DIR = os.path.join('parsedraw', 'sector analysis')
CLEAN_DIR = os.path.join('cleandata', 'sector analysis')


def setup_logging(log_dir='logs'):
    os.makedirs(log_dir, exist_ok=True)
    suffix = datetime.now().strftime('%Y%m%d%H%M%S')
    logging.basicConfig(
        filename=os.path.join(log_dir, f'sector_parser-{suffix}.log'),
        filemode='a',  # append mode
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def parse_sector_analysis(path, layout=None):
    """Read a sector analysis PDF into ``{racer: [LapRecord, ...]}``.

    Any open, extraction or token error aborts the whole document.
    """
    doc = open_document(path)
    try:
        pages = parse_file(doc)
    finally:
        doc.close()

    logger.debug(f'Extracted {sum(len(p) for p in pages)} tokens from {len(pages)} pages of {path}')
    return assemble_race_data(pages, layout)


def parse_and_save_sector_analysis(files, base_dir='.', layout=None):

    input_dir = os.path.join(base_dir, INPUT_DIR)
    raw_dir = os.path.join(base_dir, RAW_DIR)
    clean_dir = os.path.join(base_dir, CLEAN_DIR)
    os.makedirs(raw_dir, exist_ok=True)
    os.makedirs(clean_dir, exist_ok=True)

    # if files is 'All', get the list of all files
    if type(files) == str:
        if files.upper() == 'ALL':
            files = sorted(f for f in os.listdir(input_dir) if f.lower().endswith('.pdf'))
        else:
            files = [files]

    for file in files:
        try:
            jsonfile = os.path.splitext(file)[0] + '.json'
            json_path = os.path.join(raw_dir, jsonfile)
            parquetfile = os.path.splitext(file)[0] + '.pq'
            parquet_path = os.path.join(clean_dir, parquetfile)

            if jsonfile in os.listdir(raw_dir) and parquetfile in os.listdir(clean_dir):
                logger.info(f'Skipping {file}, already parsed')
                continue

            start = time.perf_counter()
            logger.info(f'Parsing {file}')
            race_data = parse_sector_analysis(os.path.join(input_dir, file), layout)

            # build both outputs before writing either
            payload = json.dumps(race_data_to_dict(race_data), indent='\t')
            dfclean = build_sector_table(race_data)

            with open(json_path, 'w') as f:
                f.write(payload)
            dfclean.to_parquet(parquet_path)

            logger.debug(f'Time taken: {time.perf_counter() - start}')
            logger.info(f'Successfully parsed and cleaned {file}')

        except Exception as e:
            logger.warning(f'Failed to parse and clean {file} with error: {e}')


def main(argv=None):
    parser = argparse.ArgumentParser(description='Parse a race sector analysis PDF into JSON.')
    parser.add_argument('-f', '--file', default='silverstone2024.pdf', help='file name to parse')
    parser.add_argument('-o', '--output', default=None, help='JSON output path (default: stdout)')
    args = parser.parse_args(argv)

    try:
        race_data = parse_sector_analysis(args.file)
    except SectorAnalysisError as e:
        logger.error(str(e))
        print(e, file=sys.stderr)
        return 1

    res = json.dumps(race_data_to_dict(race_data), indent='\t')
    if args.output:
        with open(args.output, 'w') as f:
            f.write(res)
        logger.info(f'{args.file} parsed into {args.output}')
    else:
        print(res)

    return 0


if __name__ == '__main__':
    setup_logging()
    sys.exit(main())
