# deterministic stand-in for NC_005816.1, long enough for every catalogued gene
PLASMID_SEQUENCE = "ATGGCACGT" * 1068


def write_fasta(path, records, width=70):
    with open(str(path), 'w') as handle:
        for record_id, description, sequence in records:
            handle.write(">%s %s\n" % (record_id, description))
            for i in range(0, len(sequence), width):
                handle.write(sequence[i:i + width] + "\n")
    return str(path)
