from os.path import join, abspath, dirname

RESULT_FILE_NAME = "result.zdb"
TEMPLATE_FILE_NAME = "zdbHeader.bin"

data_folder = abspath(join(dirname(__file__), "zdb", "data"))
default_template_path = join(data_folder, TEMPLATE_FILE_NAME)
