"""printf-style formatting with colour tags."""