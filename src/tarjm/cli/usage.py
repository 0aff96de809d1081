USAGE = """
Usage:
  tarjm [options] [text_to_translate]

Options:
  -d, --default <language>   Set the default target language for translation.
                             This setting is saved in the config file (~/.config/tarjm/config.json).
                             If no text or file is provided, tarjm exits after setting the default language.

  -l, --language <language>  Specify the target language for this translation.
                             This option overrides the default language set in the config.

  -f, --file <path>          Read the text to translate from the specified file.

  -v, --verbose              Enable verbose logging for debugging.

  -q, --quiet                Suppress normal console output (errors are still shown).

  -h, --help                 Display this help message.

Examples:
  tarjm "Hello World"
      Translates "Hello World" to the default language (or English if not set).

  tarjm -l es "Hello World"
      Translates "Hello World" to Spanish.

  tarjm -f mytext.txt
      Translates the content of 'mytext.txt' to the default language.

  tarjm -d fr
      Sets the default language to French.

  tarjm -h
      Displays this help message.

Environment:
  TARJM_ENDPOINT   Translation server URL (default: http://tarjm:5000/translate).
  TARJM_API_KEY    API key passed through to the server.
  TARJM_CONFIG     Path of the config file.

Description:
  tarjm is a command-line tool for translating text using a translation server.
  It translates text provided directly on the command line or read from a file.
  You can set a default target language or specify one per translation.
"""
