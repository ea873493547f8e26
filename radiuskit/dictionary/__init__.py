"""FreeRADIUS dictionary model, parser, errors, merge, lookup and sort helpers."""