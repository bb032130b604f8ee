import sys

from wishlist_scraper.pipelines.print_wishlist import main

sys.exit(main())
