"""colwidth — column width math for page-layout column blocks."""
