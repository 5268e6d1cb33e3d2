"""One module per puzzle day, 1 to 21, each providing part_one, part_two and main."""