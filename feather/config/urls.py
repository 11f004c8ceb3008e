""" Urls of the modules define here... """

# Swagger API...
from ..config.swagger import api

# All Namespaces...
from ..logic_scripts.handler import logic_script_namespace, execute_namespace





# Adding the namespaces
class URLs:
    """ All application namespaces will be declare here... """

    _registered = False

    @classmethod
    def add_namespaces(cls):
        """
        Function for adding namespaces...

        Must run before api.init_app() so every app built by the factory
        receives the resources.
        """

        if cls._registered:
            return

        api.add_namespace(logic_script_namespace)
        api.add_namespace(execute_namespace)

        cls._registered = True
